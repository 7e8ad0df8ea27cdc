"""Fixed-step explicit Euler integration."""

import typing

import accretion.body


def integrate (bodies: typing.Sequence[accretion.body.Body], dt: float) -> None:

	"""Advance every body by one time step of ``dt``.

	Position moves by the *old* velocity and velocity moves by the force
	stored on the body, so the update is simultaneous across the set::

		position += velocity * dt
		velocity += (force / mass) * dt

	There is no clamping.  Very close bodies can pick up huge velocities, and
	callers choose configurations and step sizes that keep this in check.
	"""

	for body in bodies:
		acceleration = body.force / body.mass
		body.position += body.velocity * dt
		body.velocity += acceleration * dt
