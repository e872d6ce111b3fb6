import pathlib
import random
import typing

import pytest

import solfeo.scales


@pytest.fixture
def rng () -> random.Random:

	"""A seeded random source so drill rounds are repeatable."""

	return random.Random(42)


@pytest.fixture
def restore_scale_registry () -> typing.Iterator[None]:

	"""Undo any register_scale() calls made by a test."""

	saved = dict(solfeo.scales.SCALE_INTERVALS)

	yield

	solfeo.scales.SCALE_INTERVALS.clear()
	solfeo.scales.SCALE_INTERVALS.update(saved)


@pytest.fixture
def config_file (tmp_path: pathlib.Path) -> str:

	"""Write a small YAML config and return its path."""

	path = tmp_path / "solfeo.yaml"
	path.write_text("language: es\noctave: 3\nbpm: 90\n")

	return str(path)
