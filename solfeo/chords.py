"""Chord construction from root offsets.

Unlike scale patterns, chord offsets are measured from the root rather than
from the previous tone, so ``[0, 4, 7]`` is root, major third and perfect
fifth.

Module-level constants:
- ``MAJOR_CHORD_OFFSETS``, ``MINOR_CHORD_OFFSETS``: the two triads used by the lessons
- ``CHORD_OFFSETS``: quality name to offset list
- ``CHORD_SUFFIX``: quality name to chord-symbol suffix (``"m"``, ``"dim"``, ...)
"""

import typing

import solfeo.notes


MAJOR_CHORD_OFFSETS: typing.List[int] = [0, 4, 7]  # root, major 3rd, perfect 5th
MINOR_CHORD_OFFSETS: typing.List[int] = [0, 3, 7]  # root, minor 3rd, perfect 5th


CHORD_OFFSETS: typing.Dict[str, typing.List[int]] = {
	"major": MAJOR_CHORD_OFFSETS,
	"minor": MINOR_CHORD_OFFSETS,
	"diminished": [0, 3, 6],
	"augmented": [0, 4, 8],
	"sus2": [0, 2, 7],
	"sus4": [0, 5, 7],
	"dominant_7th": [0, 4, 7, 10],
	"major_7th": [0, 4, 7, 11],
	"minor_7th": [0, 3, 7, 10],
}

CHORD_SUFFIX: typing.Dict[str, str] = {
	"major": "",
	"minor": "m",
	"diminished": "dim",
	"augmented": "+",
	"sus2": "sus2",
	"sus4": "sus4",
	"dominant_7th": "7",
	"major_7th": "maj7",
	"minor_7th": "m7",
}


def build_chord (root: solfeo.notes.Note, offsets: typing.Sequence[int]) -> typing.List[solfeo.notes.Note]:

	"""Return ``root.up(offset)`` for each offset, in order.

	Parameters:
		root: Chord root.
		offsets: Half steps above the root for each chord tone.
	"""

	return [root.up(offset) for offset in offsets]


def major_chord (root: solfeo.notes.Note) -> typing.List[solfeo.notes.Note]:

	"""Major triad: root, major 3rd, perfect 5th."""

	return build_chord(root, MAJOR_CHORD_OFFSETS)


def minor_chord (root: solfeo.notes.Note) -> typing.List[solfeo.notes.Note]:

	"""Minor triad: root, minor 3rd, perfect 5th."""

	return build_chord(root, MINOR_CHORD_OFFSETS)


def get_chord_offsets (quality: str) -> typing.List[int]:

	"""
	Return a copy of the offsets for a named chord quality.
	"""

	if quality not in CHORD_OFFSETS:
		raise ValueError(f"Unknown chord quality: {quality!r}. Available: {sorted(CHORD_OFFSETS)}")

	return list(CHORD_OFFSETS[quality])


def chord (root: solfeo.notes.Note, quality: str = "major") -> typing.List[solfeo.notes.Note]:

	"""Build a named chord quality on ``root``."""

	return build_chord(root, get_chord_offsets(quality))


def chord_symbol (root: solfeo.notes.Note, quality: str = "major") -> str:

	"""Return a chord symbol such as ``"C#m"`` or ``"Gmaj7"``."""

	if quality not in CHORD_SUFFIX:
		raise ValueError(f"Unknown chord quality: {quality!r}")

	return f"{root.english_name}{CHORD_SUFFIX[quality]}"
