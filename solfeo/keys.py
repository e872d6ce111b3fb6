"""Key-signature lookups for major keys.

The tables only list the keys the lessons use: C and the sharp keys up to
F#, and C and the flat keys down to Gb. Other roots are reported as unknown
(``None``) rather than derived from the circle of fifths.
"""

import dataclasses
import typing

import solfeo.notes


SHARPS_IN_KEY: typing.Dict[solfeo.notes.Note, int] = {
	solfeo.notes.C: 0,
	solfeo.notes.G: 1,
	solfeo.notes.D: 2,
	solfeo.notes.A: 3,
	solfeo.notes.E: 4,
	solfeo.notes.B: 5,
	solfeo.notes.F_SHARP: 6,
}

FLATS_IN_KEY: typing.Dict[solfeo.notes.Note, int] = {
	solfeo.notes.C: 0,
	solfeo.notes.F: 1,
	solfeo.notes.A_SHARP: 2,  # Bb
	solfeo.notes.D_SHARP: 3,  # Eb
	solfeo.notes.G_SHARP: 4,  # Ab
	solfeo.notes.C_SHARP: 5,  # Db
	solfeo.notes.F_SHARP: 6,  # Gb
}

# Relative minor sits a minor third below the major tonic.
RELATIVE_MINOR_OFFSET = 3


@dataclasses.dataclass(frozen=True)
class KeySignature:

	"""
	Sharp and flat counts for a major key; either may be ``None``.
	"""

	sharps: typing.Optional[int]
	flats: typing.Optional[int]


def sharps_in_key (root: solfeo.notes.Note) -> typing.Optional[int]:

	"""Number of sharps in the major key on ``root``, or ``None`` if not tabulated."""

	return SHARPS_IN_KEY.get(root)


def flats_in_key (root: solfeo.notes.Note) -> typing.Optional[int]:

	"""Number of flats in the major key on ``root``, or ``None`` if not tabulated."""

	return FLATS_IN_KEY.get(root)


def key_signature (root: solfeo.notes.Note) -> KeySignature:

	"""Both counts for ``root``.

	C has 0 of each. F# is listed in both tables (6 sharps, or 6 flats
	spelled as Gb); every other root has one side set to ``None``.
	"""

	return KeySignature(sharps=sharps_in_key(root), flats=flats_in_key(root))


def relative_minor (major_root: solfeo.notes.Note) -> solfeo.notes.Note:

	"""Tonic of the relative minor (``major_root`` down 3 half steps)."""

	return major_root.down(RELATIVE_MINOR_OFFSET)
