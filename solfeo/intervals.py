"""Interval measurement and naming.

Distances are ascending and directional: ``half_steps_between(C, G)`` is 7
while ``half_steps_between(G, C)`` is 5.
"""

import typing

import solfeo.notes


INTERVAL_NAMES: typing.Dict[str, typing.List[str]] = {
	"en": [
		"Unison",
		"Minor 2nd",
		"Major 2nd",
		"Minor 3rd",
		"Major 3rd",
		"Perfect 4th",
		"Tritone",
		"Perfect 5th",
		"Minor 6th",
		"Major 6th",
		"Minor 7th",
		"Major 7th",
		"Octave",
	],
	"es": [
		"Unísono",
		"2da Menor",
		"2da Mayor",
		"3ra Menor",
		"3ra Mayor",
		"4ta Justa",
		"Tritono",
		"5ta Justa",
		"6ta Menor",
		"6ta Mayor",
		"7ma Menor",
		"7ma Mayor",
		"Octava",
	],
}

# Fallback label for distances outside the table.
SEMITONES_LABEL: typing.Dict[str, str] = {
	"en": "{steps} semitones",
	"es": "{steps} semitonos",
}


def half_steps_between (start: solfeo.notes.Note, end: solfeo.notes.Note) -> int:

	"""Ascending distance from ``start`` to ``end`` in half steps (0-11)."""

	return solfeo.notes.wrap(end.value - start.value)


def interval_name_for_half_steps (steps: int, language: str = "en") -> str:

	"""Name a distance in half steps.

	0-12 map to Unison through Octave. Anything else falls back to a plain
	``"<n> semitones"`` label instead of failing.

	Parameters:
		steps: Distance in half steps.
		language: ``"en"`` or ``"es"``.
	"""

	if language not in INTERVAL_NAMES:
		raise ValueError(f"Unknown language: {language!r}. Available: {sorted(INTERVAL_NAMES)}")

	names = INTERVAL_NAMES[language]

	if 0 <= steps < len(names):
		return names[steps]

	return SEMITONES_LABEL[language].format(steps=steps)


def interval_name (start: solfeo.notes.Note, end: solfeo.notes.Note, language: str = "en") -> str:

	"""Name the ascending interval from ``start`` to ``end``.

	Example:
		```python
		interval_name(solfeo.notes.C, solfeo.notes.G)        # "Perfect 5th"
		interval_name(solfeo.notes.C, solfeo.notes.G, "es")  # "5ta Justa"
		```
	"""

	return interval_name_for_half_steps(half_steps_between(start, end), language)


def scale_steps (notes: typing.Sequence[solfeo.notes.Note]) -> typing.List[int]:

	"""Accumulated half steps of each note above the first, ascending.

	Each note is taken to lie above the previous one, so a built scale
	reports 12 for its final octave instead of 0.

	Example:
		```python
		scale_steps(solfeo.scales.major_scale(solfeo.notes.C))
		# [0, 2, 4, 5, 7, 9, 11, 12]
		```
	"""

	if not notes:
		return []

	steps = [0]

	for previous, current in zip(notes, notes[1:]):
		distance = half_steps_between(previous, current)

		# A repeated pitch class inside a scale is a full octave, not a unison.
		steps.append(steps[-1] + (distance or solfeo.notes.NOTE_COUNT))

	return steps
