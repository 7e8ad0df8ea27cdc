import os
import typing

import mido
import pytest

import accretion.midi_export


def _notes (mid: mido.MidiFile) -> typing.List[mido.Message]:

	"""Return the note messages from the first track."""

	return [m for m in mid.tracks[0] if m.type in ("note_on", "note_off")]


def test_ms_to_ticks () -> None:

	"""At 120 BPM, 500 ms is one beat of 480 ticks."""

	assert accretion.midi_export.ms_to_ticks(500, 120) == 480
	assert accretion.midi_export.ms_to_ticks(50, 120) == 48


def test_offsets_to_midi_timing () -> None:

	"""Onsets are sorted, normalised and written with delta times."""

	mid = accretion.midi_export.offsets_to_midi([350, 100], bpm=120, duration_ms=50)

	notes = _notes(mid)

	assert [m.type for m in notes] == ["note_on", "note_off", "note_on", "note_off"]
	assert [m.time for m in notes] == [0, 48, 192, 48]
	assert mid.ticks_per_beat == 480


def test_offsets_to_midi_tempo_and_channel () -> None:

	"""The track opens with a tempo event and notes use the requested channel and pitch."""

	mid = accretion.midi_export.offsets_to_midi([0], bpm=90, pitch=42, velocity=77, channel=3)

	tempo = mid.tracks[0][0]
	note_on = _notes(mid)[0]

	assert tempo.type == "set_tempo"
	assert tempo.tempo == mido.bpm2tempo(90)
	assert (note_on.channel, note_on.note, note_on.velocity) == (3, 42, 77)


def test_overlapping_notes_release_first () -> None:

	"""A note-off and a note-on on the same tick are ordered off, then on."""

	mid = accretion.midi_export.offsets_to_midi([0, 50], bpm=120, duration_ms=50)

	notes = _notes(mid)

	assert [m.type for m in notes] == ["note_on", "note_off", "note_on", "note_off"]
	assert notes[2].time == 0


def test_empty_offsets () -> None:

	"""No offsets gives a file with only the tempo event."""

	mid = accretion.midi_export.offsets_to_midi([])

	assert _notes(mid) == []


@pytest.mark.parametrize("kwargs", [{"channel": 16}, {"duration_ms": 0}])
def test_offsets_to_midi_rejects_bad_arguments (kwargs: dict) -> None:

	"""Out-of-range channels and empty notes are rejected."""

	with pytest.raises(ValueError):
		accretion.midi_export.offsets_to_midi([0], **kwargs)


def test_save_offsets_round_trip (tmp_path: typing.Any) -> None:

	"""A saved file can be read back with the same number of notes."""

	filename = str(tmp_path / "rhythm.mid")

	accretion.midi_export.save_offsets([0.0, 300.0, 900.0], filename, bpm=100)

	assert os.path.exists(filename)
	assert len([m for m in _notes(mido.MidiFile(filename)) if m.type == "note_on"]) == 3


def test_save_offsets_failure_propagates (tmp_path: typing.Any) -> None:

	"""Write errors are logged and re-raised."""

	filename = str(tmp_path / "missing" / "rhythm.mid")

	with pytest.raises(OSError):
		accretion.midi_export.save_offsets([0.0], filename)
