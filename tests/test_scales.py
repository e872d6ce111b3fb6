import pytest

import solfeo.notes
import solfeo.scales


def _names (notes: list) -> list:
	return [note.english_name for note in notes]


def test_c_major_scale () -> None:

	"""C major is the white keys, ending on C again."""

	scale = solfeo.scales.major_scale(solfeo.notes.C)

	assert _names(scale) == ["C", "D", "E", "F", "G", "A", "B", "C"]
	assert scale[0] == scale[-1]


def test_c_minor_scale () -> None:

	"""C natural minor uses the sharp spellings of its flats."""

	scale = solfeo.scales.minor_scale(solfeo.notes.C)

	assert _names(scale) == ["C", "D", "D#", "F", "G", "G#", "A#", "C"]


def test_major_scale_from_black_key () -> None:

	"""Scales from a black key wrap through the octave boundary."""

	scale = solfeo.scales.major_scale(solfeo.notes.F_SHARP)

	assert _names(scale) == ["F#", "G#", "A#", "B", "C#", "D#", "F", "F#"]


def test_build_scale_length () -> None:

	"""The output has one more note than the pattern has steps."""

	assert len(solfeo.scales.build_scale(solfeo.notes.A, [3, 2, 2, 3, 2])) == 6
	assert solfeo.scales.build_scale(solfeo.notes.A, []) == [solfeo.notes.A]


def test_build_scale_accumulates () -> None:

	"""Each step is applied to the previous note, not the root."""

	scale = solfeo.scales.build_scale(solfeo.notes.C, [2, 2, 2])

	assert _names(scale) == ["C", "D", "E", "F#"]


def test_named_scales () -> None:

	"""Named patterns and aliases from the registry."""

	assert _names(solfeo.scales.scale(solfeo.notes.D, "dorian")) == ["D", "E", "F", "G", "A", "B", "C", "D"]
	assert solfeo.scales.scale(solfeo.notes.A, "aeolian") == solfeo.scales.minor_scale(solfeo.notes.A)
	assert len(solfeo.scales.scale(solfeo.notes.C, "chromatic")) == 13


def test_every_octave_pattern_closes () -> None:

	"""Every built-in pattern spans exactly one octave."""

	for name in solfeo.scales.SCALE_INTERVALS:
		assert sum(solfeo.scales.get_scale_intervals(name)) == 12, name


def test_unknown_scale () -> None:

	"""Unknown names raise ValueError."""

	with pytest.raises(ValueError):
		solfeo.scales.get_scale_intervals("bebop_nonexistent")


def test_get_scale_intervals_returns_copy () -> None:

	"""Mutating the returned list does not change the registry."""

	intervals = solfeo.scales.get_scale_intervals("major")
	intervals.append(99)

	assert solfeo.scales.MAJOR_SCALE_INTERVALS == [2, 2, 1, 2, 2, 2, 1]


def test_register_scale (restore_scale_registry: None) -> None:

	"""Custom patterns become available by name."""

	solfeo.scales.register_scale("hirajoshi", [2, 1, 4, 1, 4])

	assert _names(solfeo.scales.scale(solfeo.notes.A, "hirajoshi")) == ["A", "B", "C", "E", "F", "A"]


def test_register_scale_validation (restore_scale_registry: None) -> None:

	"""Empty or non-positive patterns are rejected."""

	with pytest.raises(ValueError):
		solfeo.scales.register_scale("empty", [])

	with pytest.raises(ValueError):
		solfeo.scales.register_scale("backwards", [2, -1, 2])


def test_aliases_follow_registered_scale (restore_scale_registry: None) -> None:

	"""Re-registering a scale also changes the names that alias it."""

	solfeo.scales.register_scale("natural_minor", [2, 1, 2, 2, 1, 3, 1])

	assert solfeo.scales.scale(solfeo.notes.A, "minor") == solfeo.scales.scale(solfeo.notes.A, "natural_minor")
	assert _names(solfeo.scales.scale(solfeo.notes.A, "aeolian")) == ["A", "B", "C", "D", "E", "F", "G#", "A"]


def test_scale_names_include_aliases () -> None:

	names = solfeo.scales.scale_names()

	assert {"major", "ionian", "minor", "aeolian", "natural_minor"} <= set(names)
	assert names == sorted(names)
