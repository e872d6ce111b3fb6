"""Scale construction from step patterns.

A scale pattern lists the half steps between consecutive degrees. Building a
scale walks the pattern from the root, so a 7-step pattern that sums to 12
yields 8 notes ending on the root an octave up.

Example:
	```python
	import solfeo.notes
	import solfeo.scales

	solfeo.scales.major_scale(solfeo.notes.C)
	# [C, D, E, F, G, A, B, C]

	solfeo.scales.scale(solfeo.notes.D, "dorian")
	```
"""

import typing

import solfeo.notes


# Major scale: W-W-H-W-W-W-H
MAJOR_SCALE_INTERVALS: typing.List[int] = [2, 2, 1, 2, 2, 2, 1]

# Natural minor scale: W-H-W-W-H-W-W
MINOR_SCALE_INTERVALS: typing.List[int] = [2, 1, 2, 2, 1, 2, 2]


SCALE_INTERVALS: typing.Dict[str, typing.List[int]] = {
	"major": MAJOR_SCALE_INTERVALS,
	"natural_minor": MINOR_SCALE_INTERVALS,
	"harmonic_minor": [2, 1, 2, 2, 1, 3, 1],
	"melodic_minor": [2, 1, 2, 2, 2, 2, 1],
	"dorian": [2, 1, 2, 2, 2, 1, 2],
	"phrygian": [1, 2, 2, 2, 1, 2, 2],
	"lydian": [2, 2, 2, 1, 2, 2, 1],
	"mixolydian": [2, 2, 1, 2, 2, 1, 2],
	"locrian": [1, 2, 2, 1, 2, 2, 2],
	"major_pentatonic": [2, 2, 3, 2, 3],
	"minor_pentatonic": [3, 2, 2, 3, 2],
	"whole_tone": [2, 2, 2, 2, 2, 2],
	"chromatic": [1] * 12,
}

# Alternative names, resolved at lookup time so they follow register_scale().
SCALE_ALIASES: typing.Dict[str, str] = {
	"ionian": "major",
	"aeolian": "natural_minor",
	"minor": "natural_minor",
}


def build_scale (root: solfeo.notes.Note, intervals: typing.Sequence[int]) -> typing.List[solfeo.notes.Note]:

	"""Walk a step pattern upward from ``root``.

	Each interval is applied to the previous note, not to the root, so the
	result has ``len(intervals) + 1`` entries.

	Parameters:
		root: Starting note.
		intervals: Half steps between consecutive degrees (e.g. ``[2, 2, 1, 2, 2, 2, 1]``).

	Returns:
		The root followed by one note per step.
	"""

	notes = [root]
	current = root

	for interval in intervals:
		current = current.up(interval)
		notes.append(current)

	return notes


def major_scale (root: solfeo.notes.Note) -> typing.List[solfeo.notes.Note]:

	"""Major scale from ``root``, 8 notes (root to octave)."""

	return build_scale(root, MAJOR_SCALE_INTERVALS)


def minor_scale (root: solfeo.notes.Note) -> typing.List[solfeo.notes.Note]:

	"""Natural minor scale from ``root``, 8 notes (root to octave)."""

	return build_scale(root, MINOR_SCALE_INTERVALS)


def get_scale_intervals (name: str) -> typing.List[int]:

	"""
	Return a copy of a named step pattern from the registry.
	"""

	if name not in SCALE_INTERVALS:
		name = SCALE_ALIASES.get(name, name)

	if name not in SCALE_INTERVALS:
		raise ValueError(f"Unknown scale: {name!r}. Available: {scale_names()}")

	return list(SCALE_INTERVALS[name])


def scale_names () -> typing.List[str]:

	"""Every name :func:`scale` accepts, aliases included, sorted."""

	return sorted(set(SCALE_INTERVALS) | set(SCALE_ALIASES))


def scale (root: solfeo.notes.Note, name: str = "major") -> typing.List[solfeo.notes.Note]:

	"""Build a named scale from ``root``.

	Parameters:
		root: Starting note.
		name: Any of :func:`scale_names` (``"major"``, ``"dorian"``, ``"minor"``, ...).
	"""

	return build_scale(root, get_scale_intervals(name))


def register_scale (name: str, intervals: typing.List[int]) -> None:

	"""Register a custom step pattern for use with :func:`scale`.

	Parameters:
		name: Scale name. Registering an existing name replaces it, and
			aliases of that name (``"ionian"`` for ``"major"``) follow.
		intervals: Positive half-step counts between consecutive degrees.

	Example:
		```python
		solfeo.scales.register_scale("hirajoshi", [2, 1, 4, 1, 4])
		solfeo.scales.scale(solfeo.notes.A, "hirajoshi")
		```
	"""

	if not intervals:
		raise ValueError("intervals must not be empty")

	if any(step <= 0 for step in intervals):
		raise ValueError("intervals must be positive half-step counts")

	SCALE_INTERVALS[name] = list(intervals)
