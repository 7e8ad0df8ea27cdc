import accretion.body


def test_make_bodies_initial_state () -> None:

	"""Bodies start at rest with no force, in input order."""

	bodies = accretion.body.make_bodies([0, 300, 900], [1, 2, 3])

	assert [b.position for b in bodies] == [0.0, 300.0, 900.0]
	assert [b.mass for b in bodies] == [1.0, 2.0, 3.0]
	assert all(b.velocity == 0.0 and b.force == 0.0 and b.alive for b in bodies)


def test_make_bodies_empty () -> None:

	"""No positions means an empty body set."""

	assert accretion.body.make_bodies([], []) == []


def test_momentum () -> None:

	"""Momentum is mass times velocity."""

	body = accretion.body.Body(position=0.0, mass=4.0, velocity=-2.5)

	assert body.momentum == -10.0
