"""Pitch, frequency and timing conversions.

Equal-tempered conversion between MIDI note numbers and frequencies, plus
helpers that turn simulator offsets (milliseconds) into beats at a given
tempo.
"""

import math
import typing


A4_FREQUENCY = 440.0
A4_MIDI = 69


def midi_to_frequency (note: float, a4: float = A4_FREQUENCY) -> float:

	"""Return the frequency in Hz of a (possibly fractional) MIDI note.

	Example:
		```python
		midi_to_frequency(69)  # 440.0
		midi_to_frequency(60)  # 261.63 (middle C)
		```
	"""

	return a4 * 2.0 ** ((note - A4_MIDI) / 12.0)


def frequency_to_midi (frequency: float, a4: float = A4_FREQUENCY) -> float:

	"""Return the fractional MIDI note number of a frequency in Hz."""

	if frequency <= 0:
		raise ValueError(f"Frequency must be positive, got {frequency}")

	return A4_MIDI + 12.0 * math.log2(frequency / a4)


def nearest_midi (frequency: float, a4: float = A4_FREQUENCY) -> int:

	"""Return the MIDI note closest to a frequency."""

	return round(frequency_to_midi(frequency, a4))


def ms_to_beats (ms: float, bpm: float) -> float:

	"""Convert a duration in milliseconds to beats at ``bpm``."""

	if bpm <= 0:
		raise ValueError(f"BPM must be positive, got {bpm}")

	return ms * bpm / 60000.0


def beats_to_ms (beats: float, bpm: float) -> float:

	"""Convert a duration in beats to milliseconds at ``bpm``."""

	if bpm <= 0:
		raise ValueError(f"BPM must be positive, got {bpm}")

	return beats * 60000.0 / bpm


def offsets_to_beats (offsets: typing.Iterable[float], bpm: float) -> typing.List[float]:

	"""Convert a list of millisecond offsets to beat positions."""

	return [ms_to_beats(offset, bpm) for offset in offsets]
