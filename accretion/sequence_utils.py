"""Helpers for turning simulator offsets into usable rhythms.

The simulator returns positions in body-list order, which is not
necessarily time order.  These functions sort, normalise and grid the
offsets so they can be played or written out.
"""

import typing


def sort_offsets (offsets: typing.Iterable[float]) -> typing.List[float]:

	"""Return the offsets in ascending order as a new list."""

	return sorted(offsets)


def normalize_offsets (offsets: typing.Iterable[float]) -> typing.List[float]:

	"""Sort the offsets and shift them so the first onset is at 0.

	Example:
		```python
		normalize_offsets([310.0, 20.0, 905.5])  # [0.0, 290.0, 885.5]
		```
	"""

	ordered = sort_offsets(offsets)

	if not ordered:
		return []

	start = ordered[0]

	return [offset - start for offset in ordered]


def offsets_to_durations (offsets: typing.Iterable[float], total: typing.Optional[float] = None) -> typing.List[float]:

	"""Return the gap from each sorted onset to the next.

	The final onset lasts until ``total`` when given, otherwise its duration
	is 0.
	"""

	ordered = sort_offsets(offsets)

	if not ordered:
		return []

	durations = [b - a for a, b in zip(ordered, ordered[1:])]

	if total is None:
		durations.append(0.0)
	else:
		durations.append(max(0.0, total - ordered[-1]))

	return durations


def quantize_offsets (offsets: typing.Iterable[float], grid: float) -> typing.List[float]:

	"""Snap each offset to the nearest multiple of ``grid``, keeping input order."""

	if grid <= 0:
		raise ValueError(f"Grid must be positive, got {grid}")

	return [round(offset / grid) * grid for offset in offsets]


def offsets_to_steps (offsets: typing.Iterable[float], step_ms: float, steps: int) -> typing.List[int]:

	"""Render offsets as a binary hit sequence of ``steps`` slots.

	Each offset lights the slot nearest to it.  Offsets that land outside
	``[0, steps)`` are ignored.

	Example:
		```python
		offsets_to_steps([0, 250, 740], step_ms=125, steps=8)  # [1, 0, 1, 0, 0, 0, 1, 0]
		```
	"""

	if step_ms <= 0:
		raise ValueError(f"Step size must be positive, got {step_ms}")

	sequence = [0] * steps

	for offset in offsets:
		index = round(offset / step_ms)
		if 0 <= index < steps:
			sequence[index] = 1

	return sequence


def sequence_to_indices (sequence: typing.List[int]) -> typing.List[int]:

	"""Extract step indices where hits occur in a binary sequence."""

	return [i for i, v in enumerate(sequence) if v]
