"""Named interval sets and consonance scoring.

Scores are heuristics, not acoustics: each interval class (0-6 semitones,
octave-folded) carries a fixed consonance weight between 0.0 and 1.0, and
a chord scores the mean of its pairwise weights.
"""

import itertools
import typing


INTERVAL_DEFINITIONS: typing.Dict[str, typing.List[int]] = {
	"augmented_triad": [0, 4, 8],
	"blues_scale": [0, 3, 5, 6, 7, 10],
	"chromatic": [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11],
	"diminished_7th": [0, 3, 6, 9],
	"diminished_triad": [0, 3, 6],
	"dominant_7th": [0, 4, 7, 10],
	"dorian_mode": [0, 2, 3, 5, 7, 9, 10],
	"harmonic_minor": [0, 2, 3, 5, 7, 8, 11],
	"lydian": [0, 2, 4, 6, 7, 9, 11],
	"major_7th": [0, 4, 7, 11],
	"major_ionian": [0, 2, 4, 5, 7, 9, 11],
	"major_pentatonic": [0, 2, 4, 7, 9],
	"major_triad": [0, 4, 7],
	"minor_7th": [0, 3, 7, 10],
	"minor_pentatonic": [0, 3, 5, 7, 10],
	"minor_triad": [0, 3, 7],
	"mixolydian": [0, 2, 4, 5, 7, 9, 10],
	"natural_minor": [0, 2, 3, 5, 7, 8, 10],
	"phrygian_mode": [0, 1, 3, 5, 7, 8, 10],
	"power_chord": [0, 7],
	"sus2": [0, 2, 7],
	"sus4": [0, 5, 7],
	"whole_tone": [0, 2, 4, 6, 8, 10],
}


# Indexed by interval class: unison, m2, M2, m3, M3, P4, tritone.
INTERVAL_CONSONANCE: typing.List[float] = [1.0, 0.0, 0.2, 0.7, 0.8, 0.6, 0.1]


def get_intervals (name: str) -> typing.List[int]:

	"""
	Return a named interval list from the registry.
	"""

	if name not in INTERVAL_DEFINITIONS:
		raise ValueError(f"Unknown interval set: {name}")

	return list(INTERVAL_DEFINITIONS[name])


def interval_class (a: int, b: int) -> int:

	"""Return the octave-folded distance between two pitches (0-6).

	Example:
		```python
		interval_class(60, 67)  # 5 - a fifth folds to a fourth
		interval_class(60, 72)  # 0
		```
	"""

	distance = abs(a - b) % 12

	return min(distance, 12 - distance)


def score_interval (a: int, b: int) -> float:

	"""Return the consonance weight of the interval between two pitches."""

	return INTERVAL_CONSONANCE[interval_class(a, b)]


def score_chord (notes: typing.Sequence[int]) -> float:

	"""Return the mean pairwise consonance of a pitch collection.

	Collections of fewer than two notes score 1.0.
	"""

	pairs = list(itertools.combinations(notes, 2))

	if not pairs:
		return 1.0

	return sum(score_interval(a, b) for a, b in pairs) / len(pairs)


def rank_chords (chords: typing.Iterable[typing.Sequence[int]]) -> typing.List[typing.Sequence[int]]:

	"""Sort pitch collections from most to least consonant.

	The sort is stable, so equally scored chords keep their input order.
	"""

	return sorted(chords, key=score_chord, reverse=True)
