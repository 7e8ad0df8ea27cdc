"""Point masses on a one-dimensional axis.

A :class:`Body` is the unit the rhythm-gravity simulator works on.  Its
``position`` is read downstream as a time offset in milliseconds, so a
finished simulation is simply the list of surviving body positions.

A *body set* is a plain ordered ``list`` of bodies.  List order matters:
collision detection only compares neighbours (see
:mod:`accretion.collisions`).
"""

import dataclasses
import typing


@dataclasses.dataclass
class Body:

	"""
	A mutable point mass with position, velocity and the current net force.

	Attributes:
		position: Coordinate on the axis (a time offset in ms).
		mass: Strictly positive mass.
		velocity: Signed velocity along the axis.
		force: Signed net force from the most recent force pass. Transient -
			recomputed every tick.
		alive: Cleared when a merge removes this body from its set.
	"""

	position: float
	mass: float
	velocity: float = 0.0
	force: float = 0.0
	alive: bool = True

	@property
	def momentum (self) -> float:

		"""Return ``mass * velocity``."""

		return self.mass * self.velocity


def make_bodies (positions: typing.Sequence[float], masses: typing.Sequence[float]) -> typing.List[Body]:

	"""Build an ordered body set from parallel position and mass lists.

	Velocity and force start at zero.  No validation happens here - the
	simulation driver checks its configuration before calling this.

	Example:
		```python
		bodies = make_bodies([0, 300, 900], [5e5, 5e5, 5e5])
		[b.position for b in bodies]  # [0.0, 300.0, 900.0]
		```
	"""

	return [Body(position=float(p), mass=float(m)) for p, m in zip(positions, masses)]
