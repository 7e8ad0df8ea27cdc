"""ASCII rendering of traced simulation runs.

A read-only consumer of :class:`~accretion.simulation.Snapshot` objects.  It
never drives the simulation itself.  Each snapshot becomes one fixed-width
line with a marker per surviving body, followed by the tick index::

	|o         o                 o                             | 0
	| o        o                o                              | 1

The marker encodes a mass tier: ``"."`` (light), ``"o"`` (medium), ``"O"``
(heavy).  When two bodies land on the same column the heavier marker wins.
"""

import typing

import accretion.collisions
import accretion.simulation


DEFAULT_WIDTH = 80
LOW_MASS = 1e5
HIGH_MASS = 1e6

_TIER_ORDER = {" ": 0, ".": 1, "o": 2, "O": 3}


def mass_char (mass: float, low: float = LOW_MASS, high: float = HIGH_MASS) -> str:

	"""Map a body mass to a single marker character.

	Returns:
		``"."`` below ``low``, ``"o"`` from ``low`` up to ``high``, and ``"O"``
		at ``high`` and above.
	"""

	if mass < low:
		return "."
	if mass < high:
		return "o"
	return "O"


def render_snapshot (
	snapshot: accretion.simulation.Snapshot,
	width: int = DEFAULT_WIDTH,
	scale: float = 1.0,
	low: float = LOW_MASS,
	high: float = HIGH_MASS,
) -> str:

	"""Render one snapshot as a bracketed line plus its tick index.

	Parameters:
		snapshot: State to draw.
		width: Number of columns between the brackets.
		scale: Axis units per column (e.g. ``12`` draws 12 ms per column).
		low: Mass below which a body is drawn as ``"."``.
		high: Mass at or above which a body is drawn as ``"O"``.

	Returns:
		A single line such as ``"|o   o   O|  3"``.  Bodies that fall outside
		the line are not drawn.
	"""

	if width <= 0:
		raise ValueError(f"width must be positive, got {width}")

	if scale <= 0:
		raise ValueError(f"scale must be positive, got {scale}")

	cells = [" "] * width

	for position, mass in snapshot.pairs():

		column = round(position / scale)

		if column < 0 or column >= width:
			continue

		char = mass_char(mass, low, high)

		if _TIER_ORDER[char] > _TIER_ORDER[cells[column]]:
			cells[column] = char

	return f"|{''.join(cells)}| {snapshot.tick}"


def render_trace (
	positions: typing.Sequence[float],
	masses: typing.Sequence[float],
	time: int,
	dt: float = accretion.simulation.DEFAULT_STEP,
	quantum: float = accretion.collisions.COLLISION_QUANTUM,
	width: int = DEFAULT_WIDTH,
	scale: float = 1.0,
) -> typing.Iterator[str]:

	"""Run a traced simulation and yield one rendered line per snapshot.

	The configuration is validated before the first line is produced.
	"""

	snapshots = accretion.simulation.trace(positions, masses, time, dt=dt, quantum=quantum)

	return (render_snapshot(snapshot, width=width, scale=scale) for snapshot in snapshots)
