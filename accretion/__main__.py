import argparse
import logging
import os
import sys
import typing

import yaml

import accretion.collisions
import accretion.display
import accretion.midi_export
import accretion.sequence_utils
import accretion.simulation


logger = logging.getLogger(__name__)

DEFAULT_POSITIONS = [0, 300, 900]
DEFAULT_MASSES = [500000, 500000, 500000]
DEFAULT_TIME = 50


def load_config (config_path: str = 'config.yaml') -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


def parse_args (argv: typing.Optional[typing.List[str]] = None) -> argparse.Namespace:

	parser = argparse.ArgumentParser(prog="accretion", description="Generate rhythmic offsets from a 1-D gravity simulation.")
	parser.add_argument("--config", default="config.yaml", help="Path to a YAML config file (default: config.yaml)")

	return parser.parse_args(argv)


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the accretion command.
	"""

	logging.basicConfig(level=logging.INFO)

	args = parse_args(argv)
	config = load_config(args.config)

	sim_config = config.get('simulation') or {}
	display_config = config.get('display') or {}
	midi_config = config.get('midi') or {}

	positions = sim_config.get('positions', DEFAULT_POSITIONS)
	masses = sim_config.get('masses', DEFAULT_MASSES)
	time = sim_config.get('time', DEFAULT_TIME)
	dt = sim_config.get('dt', accretion.simulation.DEFAULT_STEP)
	quantum = sim_config.get('quantum', accretion.collisions.COLLISION_QUANTUM)

	logger.info(f"Simulating {len(positions)} bodies for {time} ticks (dt={dt})")

	try:
		if display_config.get('trace', False):
			# The trace always yields the initial state, so the last snapshot is set.
			for snapshot in accretion.simulation.trace(positions, masses, time, dt=dt, quantum=quantum):
				print(accretion.display.render_snapshot(
					snapshot,
					width=display_config.get('width', accretion.display.DEFAULT_WIDTH),
					scale=display_config.get('scale', 1.0),
				))

			offsets = list(snapshot.positions)

		else:
			offsets = accretion.simulation.simulate(positions, masses, time, dt=dt, quantum=quantum)

	except accretion.simulation.InvalidConfigurationError as e:
		logger.error(f"Invalid configuration: {e}")
		return 2

	logger.info(f"{len(offsets)} offsets: {[round(o, 2) for o in accretion.sequence_utils.sort_offsets(offsets)]}")

	filename = midi_config.get('filename')

	if filename:
		accretion.midi_export.save_offsets(
			offsets,
			filename,
			bpm=midi_config.get('bpm', 120),
			pitch=midi_config.get('pitch', 36),
			velocity=midi_config.get('velocity', 100),
		)

	return 0


if __name__ == "__main__":
	sys.exit(main())
