"""Chords as pitch collections: naming, rotation, expansion and voice leading.

Two representations are used side by side:

- *interval lists* - semitones above a root, e.g. ``[0, 4, 7]``;
- *pitch collections* - absolute MIDI note numbers, e.g. ``[60, 64, 67]``.

:class:`Chord` names a root pitch class and a quality and produces either.
The free functions operate on plain lists so they can be chained with
:mod:`accretion.intervals` scoring.

Example:
	```python
	chord = Chord(root_pc=0, quality="major")
	notes = chord.tones(60)           # [60, 64, 67]
	rotate_chord(notes, 1)            # [64, 67, 72]
	expand_chord(notes, 5)            # [60, 64, 67, 72, 76]
	```
"""

import dataclasses
import typing


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"F": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
}

PC_TO_NOTE_NAME: typing.List[str] = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

CHORD_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"major": [0, 4, 7],
	"minor": [0, 3, 7],
	"diminished": [0, 3, 6],
	"augmented": [0, 4, 8],
	"dominant_7th": [0, 4, 7, 10],
	"major_7th": [0, 4, 7, 11],
	"minor_7th": [0, 3, 7, 10],
	"half_diminished_7th": [0, 3, 6, 10],
	"sus2": [0, 2, 7],
	"sus4": [0, 5, 7],
}

CHORD_SUFFIX: typing.Dict[str, str] = {
	"major": "",
	"minor": "m",
	"diminished": "dim",
	"augmented": "+",
	"dominant_7th": "7",
	"major_7th": "maj7",
	"minor_7th": "m7",
	"half_diminished_7th": "m7b5",
	"sus2": "sus2",
	"sus4": "sus4",
}


def key_name_to_pc (key_name: str) -> int:

	"""Validate a note name and return its pitch class (0-11).

	Raises:
		ValueError: If the name is not recognised.
	"""

	if key_name not in NOTE_NAME_TO_PC:
		raise ValueError(
			f"Unknown key name: {key_name!r}. Expected e.g. 'C', 'F#', 'Bb'."
		)

	return NOTE_NAME_TO_PC[key_name]


def invert_intervals (intervals: typing.List[int], inversion: int) -> typing.List[int]:

	"""Return an inversion of an interval list, re-zeroed on its new bass.

	Example:
		```python
		invert_intervals([0, 4, 7], 1)  # [0, 3, 8]
		invert_intervals([0, 4, 7], 2)  # [0, 5, 9]
		```
	"""

	if not intervals:
		return []

	raised = rotate_chord(intervals, inversion % len(intervals))

	return [i - raised[0] for i in raised]


def rotate_chord (notes: typing.List[int], steps: int) -> typing.List[int]:

	"""Rotate a pitch collection through its inversions.

	Each positive step lifts the lowest note by an octave.  Each negative step
	drops the highest note by an octave.  The result is sorted ascending.

	Example:
		```python
		rotate_chord([60, 64, 67], 1)   # [64, 67, 72]
		rotate_chord([60, 64, 67], -1)  # [55, 60, 64]
		```
	"""

	result = sorted(notes)

	if not result:
		return []

	for _ in range(abs(steps)):
		if steps > 0:
			result = result[1:] + [result[0] + 12]
		else:
			result = [result[-1] - 12] + result[:-1]

	return result


def expand_chord (notes: typing.List[int], count: int) -> typing.List[int]:

	"""Extend a pitch collection upward by octaves until it holds ``count`` notes.

	The collection is sorted first. When ``count`` is smaller than the input,
	the lowest ``count`` notes are returned.

	Example:
		```python
		expand_chord([60, 64, 67], 7)  # [60, 64, 67, 72, 76, 79, 84]
		```
	"""

	if count < 0:
		raise ValueError(f"count must not be negative, got {count}")

	base = sorted(notes)

	if not base:
		return []

	n = len(base)

	return [base[i % n] + 12 * (i // n) for i in range(count)]


def voice_lead (intervals: typing.List[int], root_midi: int, previous_voicing: typing.Optional[typing.List[int]]) -> typing.List[int]:

	"""Pick the inversion that moves least from the previous voicing.

	Falls back to root position when there is no previous voicing or the
	chord sizes differ.
	"""

	if not intervals:
		return []

	root_position = [root_midi + i for i in intervals]

	if previous_voicing is None or len(previous_voicing) != len(intervals):
		return root_position

	candidates = (
		[root_midi + i for i in invert_intervals(intervals, inversion)]
		for inversion in range(len(intervals))
	)

	# min() keeps the first candidate on ties, so root position wins a draw.
	return min(candidates, key=lambda voicing: sum(abs(a - b) for a, b in zip(voicing, previous_voicing)))


@dataclasses.dataclass(frozen=True)
class Chord:

	"""
	A chord as a root pitch class and a quality name.
	"""

	root_pc: int
	quality: str

	def intervals (self) -> typing.List[int]:

		"""Return the interval list for this chord's quality."""

		if self.quality not in CHORD_INTERVALS:
			raise ValueError(f"Unknown chord quality: {self.quality}")

		return list(CHORD_INTERVALS[self.quality])

	def tones (self, root: int, inversion: int = 0, count: typing.Optional[int] = None) -> typing.List[int]:

		"""Return MIDI notes for this chord, rooted nearest to ``root``.

		Parameters:
			root: Reference MIDI note. The chord root lands on the octave of
				``root_pc`` closest to it.
			inversion: Inversion to apply (wraps around).
			count: When set, expand the voicing upward to this many notes.

		Example:
			```python
			Chord(root_pc=0, quality="major").tones(60)     # [60, 64, 67]
			Chord(root_pc=0, quality="major").tones(70)     # [72, 76, 79]
			Chord(root_pc=0, quality="major").tones(60, 1)  # [64, 67, 72]
			```
		"""

		offset = (self.root_pc - root) % 12
		if offset > 6:
			offset -= 12

		intervals = self.intervals()
		notes = rotate_chord([root + offset + i for i in intervals], inversion % len(intervals))

		if count is not None:
			return expand_chord(notes, count)

		return notes

	def name (self) -> str:

		"""Return a human-friendly chord name such as ``"Ebm7"``."""

		return f"{PC_TO_NOTE_NAME[self.root_pc % 12]}{CHORD_SUFFIX.get(self.quality, '')}"

	@classmethod
	def from_name (cls, key_name: str, quality: str = "major") -> "Chord":

		"""Build a chord from a note name, e.g. ``Chord.from_name("F#", "minor")``."""

		if quality not in CHORD_INTERVALS:
			raise ValueError(f"Unknown chord quality: {quality}")

		return cls(root_pc=key_name_to_pc(key_name), quality=quality)
