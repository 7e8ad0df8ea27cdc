"""Rhythm-gravity simulation driver.

Turns an initial spatial/mass configuration into a list of rhythmic offsets
by letting the bodies attract, drift and merge for a fixed number of ticks.
Each tick is a strict pipeline::

	compute forces -> integrate -> resolve collisions

Two entry points share that pipeline:

- :func:`simulate` (batch mode) runs every tick and returns the final
  positions.
- :func:`trace` (traced mode) yields a :class:`Snapshot` per tick and stops
  early once fewer than two bodies remain.

Example:
	```python
	import accretion.simulation

	offsets = accretion.simulation.simulate([0, 300, 900], [5e5, 5e5, 5e5], time=50)

	for snapshot in accretion.simulation.trace([0, 1], [1e6, 1e6], time=50):
		print(snapshot.tick, snapshot.positions)
	```
"""

import dataclasses
import logging
import typing

import accretion.body
import accretion.collisions
import accretion.forces
import accretion.integrator


logger = logging.getLogger(__name__)

DEFAULT_STEP = 20


class InvalidConfigurationError (ValueError):

	"""The simulation inputs are unusable.  Raised before any tick runs."""


@dataclasses.dataclass(frozen=True)
class Snapshot:

	"""
	An immutable view of the body set after a tick.

	Attributes:
		tick: Number of physics ticks applied so far (0 = initial state).
		positions: Body positions in list order.
		masses: Body masses in the same order.
	"""

	tick: int
	positions: typing.Tuple[float, ...]
	masses: typing.Tuple[float, ...]

	def __len__ (self) -> int:
		return len(self.positions)

	def pairs (self) -> typing.List[typing.Tuple[float, float]]:

		"""Return ``(position, mass)`` for every surviving body."""

		return list(zip(self.positions, self.masses))


class Simulation:

	"""One run of the rhythm-gravity model.

	Owns a single ordered body set for its whole lifetime.  Runs never share
	state, so separate instances can be driven independently.
	"""

	def __init__ (
		self,
		positions: typing.Sequence[float],
		masses: typing.Sequence[float],
		dt: float = DEFAULT_STEP,
		quantum: float = accretion.collisions.COLLISION_QUANTUM,
	) -> None:

		"""Validate the configuration and materialise the body set.

		Parameters:
			positions: Initial positions (time offsets in ms).
			masses: Initial masses, one per position, all positive.
			dt: Fixed step size for every tick.
			quantum: Spatial quantum used for collision detection.

		Raises:
			InvalidConfigurationError: On mismatched lengths, a non-positive
				mass, step size or quantum.
		"""

		if len(positions) != len(masses):
			raise InvalidConfigurationError(
				f"positions and masses differ in length ({len(positions)} != {len(masses)})"
			)

		for index, mass in enumerate(masses):
			if mass <= 0:
				raise InvalidConfigurationError(f"Mass at index {index} must be positive, got {mass}")

		if dt <= 0:
			raise InvalidConfigurationError(f"Step size must be positive, got {dt}")

		if quantum <= 0:
			raise InvalidConfigurationError(f"Collision quantum must be positive, got {quantum}")

		self.dt = dt
		self.quantum = quantum
		self.tick = 0
		self.bodies: typing.List[accretion.body.Body] = accretion.body.make_bodies(positions, masses)

	@property
	def offsets (self) -> typing.List[float]:

		"""Current body positions in list order."""

		return [body.position for body in self.bodies]

	@property
	def running (self) -> bool:

		"""``True`` while at least two bodies remain to attract each other."""

		return len(self.bodies) >= 2

	def snapshot (self) -> Snapshot:

		"""Capture the current state."""

		return Snapshot(
			tick=self.tick,
			positions=tuple(body.position for body in self.bodies),
			masses=tuple(body.mass for body in self.bodies),
		)

	def step (self) -> None:

		"""Apply one tick: forces, then integration, then collision merging."""

		accretion.forces.compute_forces(self.bodies)
		accretion.integrator.integrate(self.bodies, self.dt)

		before = len(self.bodies)
		self.bodies = accretion.collisions.resolve_collisions(self.bodies, self.quantum)
		self.tick += 1

		if len(self.bodies) != before:
			logger.debug(f"Tick {self.tick}: {before - len(self.bodies)} merge(s), {len(self.bodies)} bodies remain")

	def run (self, time: int) -> typing.List[float]:

		"""Apply ``time`` ticks without early termination and return the offsets."""

		for _ in range(time):
			self.step()

		return self.offsets

	def iter_ticks (self, time: int) -> typing.Iterator[Snapshot]:

		"""Yield the current state, then the state after each tick.

		Stops once the tick budget is spent or fewer than two bodies remain.
		"""

		yield self.snapshot()

		for _ in range(time):

			if not self.running:
				break

			self.step()
			yield self.snapshot()


def _check_time (time: int) -> None:

	# bool is an int subclass but never a meaningful tick count.
	if isinstance(time, bool) or not isinstance(time, int):
		raise InvalidConfigurationError(f"Tick count must be an integer, got {time!r}")

	if time < 0:
		raise InvalidConfigurationError(f"Tick count must not be negative, got {time}")


def simulate (
	positions: typing.Sequence[float],
	masses: typing.Sequence[float],
	time: int,
	dt: float = DEFAULT_STEP,
	quantum: float = accretion.collisions.COLLISION_QUANTUM,
) -> typing.List[float]:

	"""Run the model in batch mode and return the final offsets.

	The first of the ``time + 1`` ticks materialises the body set and the
	remaining ``time`` apply the physics.  The run never stops early, and if
	every body merges away the result is an empty list.

	Parameters:
		positions: Initial positions (time offsets in ms).
		masses: Initial masses, one per position.
		time: Number of physics ticks to apply.
		dt: Step size (default 20).
		quantum: Collision quantum (default 3).

	Returns:
		Surviving positions in list order. They are not re-sorted.

	Raises:
		InvalidConfigurationError: Before any tick, for bad inputs.
	"""

	_check_time(time)

	simulation = Simulation(positions, masses, dt=dt, quantum=quantum)

	return simulation.run(time)


def trace (
	positions: typing.Sequence[float],
	masses: typing.Sequence[float],
	time: int,
	dt: float = DEFAULT_STEP,
	quantum: float = accretion.collisions.COLLISION_QUANTUM,
) -> typing.Iterator[Snapshot]:

	"""Run the model in traced mode, yielding one snapshot per tick.

	The configuration is validated immediately, before the first ``next()``.
	The returned iterator is lazy and finite and cannot be restarted.  It
	yields the initial state and then the state after each tick, and it
	stops once fewer than two bodies remain.

	Raises:
		InvalidConfigurationError: For bad inputs.
	"""

	_check_time(time)

	simulation = Simulation(positions, masses, dt=dt, quantum=quantum)

	return simulation.iter_ticks(time)
