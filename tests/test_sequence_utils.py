import pytest

import accretion.sequence_utils


def test_sort_offsets () -> None:

	"""Offsets come back ascending as a new list."""

	offsets = [900.0, 0.0, 300.0]

	assert accretion.sequence_utils.sort_offsets(offsets) == [0.0, 300.0, 900.0]
	assert offsets == [900.0, 0.0, 300.0]


def test_normalize_offsets () -> None:

	"""The earliest onset moves to zero."""

	assert accretion.sequence_utils.normalize_offsets([310.0, 20.0, 905.5]) == pytest.approx([0.0, 290.0, 885.5])
	assert accretion.sequence_utils.normalize_offsets([]) == []


def test_offsets_to_durations () -> None:

	"""Durations are gaps between sorted onsets."""

	assert accretion.sequence_utils.offsets_to_durations([250, 0, 100]) == [100, 150, 0.0]
	assert accretion.sequence_utils.offsets_to_durations([0, 100, 250], total=400) == [100, 150, 150]
	assert accretion.sequence_utils.offsets_to_durations([], total=400) == []


def test_quantize_offsets () -> None:

	"""Offsets snap to the nearest grid line in input order."""

	assert accretion.sequence_utils.quantize_offsets([26, 14], 10) == [30, 10]

	with pytest.raises(ValueError):
		accretion.sequence_utils.quantize_offsets([1], 0)


def test_offsets_to_steps () -> None:

	"""Offsets light the nearest step; out-of-range offsets are dropped."""

	assert accretion.sequence_utils.offsets_to_steps([0, 250, 740], step_ms=125, steps=8) == [1, 0, 1, 0, 0, 0, 1, 0]
	assert accretion.sequence_utils.offsets_to_steps([-500, 5000], step_ms=125, steps=4) == [0, 0, 0, 0]


def test_sequence_to_indices () -> None:

	"""Extract indices from a binary sequence with hits at known positions."""

	assert accretion.sequence_utils.sequence_to_indices([1, 0, 0, 1, 1]) == [0, 3, 4]
	assert accretion.sequence_utils.sequence_to_indices([0, 0]) == []
