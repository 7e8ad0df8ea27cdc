import pytest

import accretion.chords


def test_tones_root_position () -> None:

	"""A C major chord around C4 is C E G."""

	chord = accretion.chords.Chord(root_pc=0, quality="major")

	assert chord.tones(60) == [60, 64, 67]


def test_tones_nearest_octave () -> None:

	"""The root lands on the octave closest to the reference note."""

	chord = accretion.chords.Chord(root_pc=0, quality="major")

	assert chord.tones(62) == [60, 64, 67]
	assert chord.tones(70) == [72, 76, 79]


def test_tones_inversion () -> None:

	"""An inversion rotates the actual notes, bass first."""

	chord = accretion.chords.Chord(root_pc=0, quality="major")

	assert chord.tones(60, inversion=1) == [64, 67, 72]
	assert chord.tones(60, inversion=3) == [60, 64, 67]


def test_tones_count_expands () -> None:

	"""Asking for more notes stacks the chord upward."""

	chord = accretion.chords.Chord(root_pc=9, quality="minor")

	assert chord.tones(57, count=5) == [57, 60, 64, 69, 72]


def test_unknown_quality_raises () -> None:

	"""Unknown qualities are rejected when intervals are needed."""

	with pytest.raises(ValueError):
		accretion.chords.Chord(root_pc=0, quality="mystery").intervals()


def test_name () -> None:

	"""Names combine the root note and the quality suffix."""

	assert accretion.chords.Chord(root_pc=3, quality="minor_7th").name() == "D#m7"
	assert accretion.chords.Chord(root_pc=7, quality="major").name() == "G"


def test_from_name () -> None:

	"""Chords can be built from a note name."""

	assert accretion.chords.Chord.from_name("Bb", "minor") == accretion.chords.Chord(root_pc=10, quality="minor")

	with pytest.raises(ValueError):
		accretion.chords.Chord.from_name("H")


def test_key_name_to_pc () -> None:

	"""Sharps and flats map to the same pitch class."""

	assert accretion.chords.key_name_to_pc("F#") == accretion.chords.key_name_to_pc("Gb") == 6


def test_rotate_chord_up_and_down () -> None:

	"""Positive steps lift the bass, negative steps drop the top."""

	assert accretion.chords.rotate_chord([60, 64, 67], 1) == [64, 67, 72]
	assert accretion.chords.rotate_chord([60, 64, 67], 2) == [67, 72, 76]
	assert accretion.chords.rotate_chord([60, 64, 67], -1) == [55, 60, 64]
	assert accretion.chords.rotate_chord([67, 60, 64], 0) == [60, 64, 67]


def test_rotate_chord_full_cycle () -> None:

	"""Rotating by the chord size moves it up an octave."""

	assert accretion.chords.rotate_chord([60, 64, 67], 3) == [72, 76, 79]


def test_rotate_chord_empty () -> None:

	"""An empty collection stays empty."""

	assert accretion.chords.rotate_chord([], 2) == []


def test_expand_chord () -> None:

	"""Expansion repeats the collection an octave higher each pass."""

	assert accretion.chords.expand_chord([60, 64, 67], 7) == [60, 64, 67, 72, 76, 79, 84]
	assert accretion.chords.expand_chord([67, 60], 3) == [60, 67, 72]
	assert accretion.chords.expand_chord([60, 64, 67], 2) == [60, 64]
	assert accretion.chords.expand_chord([], 4) == []


def test_expand_chord_negative_count_raises () -> None:

	"""A negative count is a ValueError."""

	with pytest.raises(ValueError):
		accretion.chords.expand_chord([60], -1)


def test_invert_intervals () -> None:

	"""Interval inversions are re-zeroed on the new bass."""

	assert accretion.chords.invert_intervals([0, 4, 7], 0) == [0, 4, 7]
	assert accretion.chords.invert_intervals([0, 4, 7], 1) == [0, 3, 8]
	assert accretion.chords.invert_intervals([0, 4, 7], 2) == [0, 5, 9]
	assert accretion.chords.invert_intervals([0, 4, 7, 10], 3) == [0, 2, 6, 9]
	assert accretion.chords.invert_intervals([0, 4, 7], 4) == [0, 3, 8]


def test_voice_lead_without_previous () -> None:

	"""No previous voicing, or a size mismatch, gives root position."""

	assert accretion.chords.voice_lead([0, 4, 7], 60, None) == [60, 64, 67]
	assert accretion.chords.voice_lead([0, 4, 7], 60, [60, 64]) == [60, 64, 67]


def test_voice_lead_picks_smallest_movement () -> None:

	"""The inversion with the least total movement wins."""

	# Costs: root 12, first inversion 12, second inversion 9.
	assert accretion.chords.voice_lead([0, 4, 7], 60, [64, 67, 72]) == [60, 65, 69]
