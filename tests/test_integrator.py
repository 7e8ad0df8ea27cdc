import pytest

import accretion.body
import accretion.integrator


def test_integrate_euler_step () -> None:

	"""Position uses the old velocity, velocity uses force over mass."""

	body = accretion.body.Body(position=10.0, mass=2.0, velocity=2.0, force=4.0)

	accretion.integrator.integrate([body], 0.5)

	assert body.position == pytest.approx(11.0)
	assert body.velocity == pytest.approx(3.0)


def test_integrate_body_at_rest_does_not_move_on_first_step () -> None:

	"""A body starting at rest only gains velocity on its first step."""

	body = accretion.body.Body(position=7.0, mass=1.0, force=-3.0)

	accretion.integrator.integrate([body], 20)

	assert body.position == 7.0
	assert body.velocity == pytest.approx(-60.0)


def test_integrate_leaves_force_untouched () -> None:

	"""Integration reads force but does not reset it."""

	bodies = accretion.body.make_bodies([0, 1], [1, 1])
	bodies[0].force = 0.5

	accretion.integrator.integrate(bodies, 1)

	assert bodies[0].force == 0.5
	assert bodies[1].velocity == 0.0
