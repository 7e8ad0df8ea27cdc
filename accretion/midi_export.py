"""Write simulator offsets to a Standard MIDI File.

Each offset becomes one short note on a single track.  Offsets are sorted and
normalised first, so the earliest onset sits at the start of the file.
"""

import logging
import typing

import mido

import accretion.pitch
import accretion.sequence_utils


logger = logging.getLogger(__name__)

TICKS_PER_BEAT = 480


def ms_to_ticks (ms: float, bpm: float) -> int:

	"""Convert milliseconds to MIDI file ticks at ``bpm``."""

	return round(accretion.pitch.ms_to_beats(ms, bpm) * TICKS_PER_BEAT)


def offsets_to_midi (
	offsets: typing.Iterable[float],
	bpm: float = 120,
	pitch: int = 36,
	velocity: int = 100,
	duration_ms: float = 50,
	channel: int = 9,
) -> mido.MidiFile:

	"""Build a single-track MIDI file with one note per offset.

	Parameters:
		offsets: Onset times in milliseconds (any order).
		bpm: Tempo written to the file and used for the ms-to-tick conversion.
		pitch: MIDI note number for every hit (36 = GM kick).
		velocity: Note-on velocity.
		duration_ms: Length of each note.
		channel: MIDI channel, 0-15 (9 = GM drums).

	Returns:
		An unsaved ``mido.MidiFile``.
	"""

	if not 0 <= channel <= 15:
		raise ValueError(f"MIDI channel must be 0-15, got {channel}")

	if duration_ms <= 0:
		raise ValueError(f"Note duration must be positive, got {duration_ms}")

	mid = mido.MidiFile(type=1)
	mid.ticks_per_beat = TICKS_PER_BEAT

	track = mido.MidiTrack()
	mid.tracks.append(track)
	track.append(mido.MetaMessage("set_tempo", tempo=mido.bpm2tempo(bpm), time=0))

	length = ms_to_ticks(duration_ms, bpm)
	events: typing.List[typing.Tuple[int, int, mido.Message]] = []

	for offset in accretion.sequence_utils.normalize_offsets(offsets):
		start = ms_to_ticks(offset, bpm)
		events.append((start, 1, mido.Message("note_on", channel=channel, note=pitch, velocity=velocity)))
		events.append((start + length, 0, mido.Message("note_off", channel=channel, note=pitch, velocity=0)))

	# Note-offs sort ahead of note-ons on the same tick.
	events.sort(key=lambda event: (event[0], event[1]))

	last_tick = 0

	for tick, _, message in events:
		message.time = tick - last_tick
		track.append(message)
		last_tick = tick

	return mid


def save_offsets (offsets: typing.Iterable[float], filename: str, **kwargs: typing.Any) -> None:

	"""Build a MIDI file from ``offsets`` and save it to ``filename``.

	Keyword arguments are passed to :func:`offsets_to_midi`.
	"""

	offsets = list(offsets)
	mid = offsets_to_midi(offsets, **kwargs)

	logger.info(f"Saving {len(offsets)} onsets to {filename}...")

	try:
		mid.save(filename)
	except OSError as e:
		logger.error(f"Failed to save MIDI file: {e}")
		raise

	logger.info(f"Saved {filename}")
