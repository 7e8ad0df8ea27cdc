"""Adjacent-pair collision detection and inelastic merging.

Two neighbouring bodies collide when their positions fall into the same
spatial quantum (``round(position / quantum)``).  The later body in the
list (the leading one) yields: it is marked dead and the earlier, trailing
body carries on with the momentum-weighted velocity of the pair.

The survivor keeps its own mass.  Only its velocity reflects the merge.

Only list neighbours are compared.  The scan assumes the body set is still
ordered by position, and bodies that have crossed are not re-sorted.
"""

import logging
import typing

import accretion.body


logger = logging.getLogger(__name__)

COLLISION_QUANTUM = 3


def quantize (position: float, quantum: float = COLLISION_QUANTUM) -> int:

	"""Return the index of the spatial quantum that ``position`` falls in."""

	return round(position / quantum)


def collided (a: accretion.body.Body, b: accretion.body.Body, quantum: float = COLLISION_QUANTUM) -> bool:

	"""Return ``True`` when two bodies occupy the same quantised position."""

	return quantize(a.position, quantum) == quantize(b.position, quantum)


def merged_velocity (a: accretion.body.Body, b: accretion.body.Body) -> float:

	"""Return the momentum-conserving velocity of two bodies combined."""

	return (a.momentum + b.momentum) / (a.mass + b.mass)


def resolve_collisions (
	bodies: typing.List[accretion.body.Body],
	quantum: float = COLLISION_QUANTUM,
) -> typing.List[accretion.body.Body]:

	"""Merge colliding neighbours and return the surviving bodies.

	Pairs are visited strictly left to right over the list as it stood
	before the pass.  In each colliding pair the trailing (earlier) body
	takes the merged velocity and the leading (later) body is marked dead.
	A body marked dead never forms a later pair: the next body is compared
	with the survivor instead.  Removals are applied once the whole pass is
	done, so indices do not shift under the scan.  A run of coincident
	neighbours collapses into its leftmost member.

	Parameters:
		bodies: Ordered body set (not modified in length).
		quantum: Width of one spatial quantum.

	Returns:
		A new list holding only the live bodies, in their original order.
	"""

	survivor: typing.Optional[accretion.body.Body] = None

	for body in bodies:

		if not body.alive:
			continue

		if survivor is not None and collided(survivor, body, quantum):
			survivor.velocity = merged_velocity(survivor, body)
			body.alive = False
			logger.debug(f"Merged body at {body.position:.3f} into body at {survivor.position:.3f}")
			continue

		survivor = body

	return [body for body in bodies if body.alive]
