"""Pairwise gravitational attraction along a line.

Every body is pulled toward every other body with magnitude
``G * m1 * m2 / r ** 2``.  The sign points at the other body: positive when
it lies further along the axis, negative when it lies behind.
"""

import typing

import accretion.body


GRAVITATIONAL_CONSTANT = 6.67398e-11


class DegenerateForceError (RuntimeError):

	"""Two live bodies share a position when forces are computed.

	Collision resolution should have merged them on the tick that brought
	them together, so this signals a broken internal invariant rather than
	bad user input.
	"""


def pair_force (body: accretion.body.Body, other: accretion.body.Body) -> float:

	"""Return the signed force that ``other`` exerts on ``body``.

	Raises:
		DegenerateForceError: If the two bodies are at the same position.
	"""

	r = other.position - body.position

	if r == 0:
		raise DegenerateForceError(
			f"Zero separation between bodies at position {body.position}"
		)

	magnitude = GRAVITATIONAL_CONSTANT * body.mass * other.mass / (r * r)

	return magnitude if r > 0 else -magnitude


def net_force (body: accretion.body.Body, bodies: typing.Sequence[accretion.body.Body]) -> float:

	"""Sum the signed pull of every other body in the set on ``body``."""

	return sum(pair_force(body, other) for other in bodies if other is not body)


def compute_forces (bodies: typing.Sequence[accretion.body.Body]) -> None:

	"""Store the net force on every body.

	All forces are computed before any is written back, so each one sees the
	same positions.  This is a full O(n^2) pass, not a neighbour-only one.
	"""

	forces = [net_force(body, bodies) for body in bodies]

	for body, force in zip(bodies, forces):
		body.force = force
