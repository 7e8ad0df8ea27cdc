import typing

import pytest


@pytest.fixture
def spread_config () -> typing.Tuple[typing.List[float], typing.List[float]]:

	"""Three well-separated bodies that drift but do not merge within a few ticks."""

	return [0.0, 300.0, 900.0], [500000.0, 500000.0, 500000.0]


@pytest.fixture
def write_config (tmp_path: typing.Any) -> typing.Callable[[str], str]:

	"""Return a helper that writes YAML text to a temporary config file."""

	def _write (text: str) -> str:
		path = tmp_path / "config.yaml"
		path.write_text(text)
		return str(path)

	return _write
