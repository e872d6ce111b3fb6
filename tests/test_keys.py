import solfeo.keys
import solfeo.notes


def test_sharp_keys () -> None:

	"""Sharp counts follow the circle of fifths up to F#."""

	expected = [("C", 0), ("G", 1), ("D", 2), ("A", 3), ("E", 4), ("B", 5), ("F#", 6)]

	for name, sharps in expected:
		assert solfeo.keys.sharps_in_key(solfeo.notes.Note.parse(name)) == sharps


def test_flat_keys () -> None:

	"""Flat counts follow the circle of fifths down to Gb."""

	expected = [("C", 0), ("F", 1), ("Bb", 2), ("Eb", 3), ("Ab", 4), ("Db", 5), ("Gb", 6)]

	for name, flats in expected:
		assert solfeo.keys.flats_in_key(solfeo.notes.Note.parse(name)) == flats


def test_tables_stay_partial () -> None:

	"""Roots missing from a table report None rather than a computed count."""

	assert solfeo.keys.sharps_in_key(solfeo.notes.F) is None
	assert solfeo.keys.sharps_in_key(solfeo.notes.C_SHARP) is None
	assert solfeo.keys.flats_in_key(solfeo.notes.G) is None
	assert solfeo.keys.flats_in_key(solfeo.notes.B) is None


def test_key_signature () -> None:

	"""key_signature() reports both sides."""

	assert solfeo.keys.key_signature(solfeo.notes.C) == solfeo.keys.KeySignature(sharps=0, flats=0)
	assert solfeo.keys.key_signature(solfeo.notes.E) == solfeo.keys.KeySignature(sharps=4, flats=None)
	assert solfeo.keys.key_signature(solfeo.notes.D_SHARP) == solfeo.keys.KeySignature(sharps=None, flats=3)
	assert solfeo.keys.key_signature(solfeo.notes.F_SHARP) == solfeo.keys.KeySignature(sharps=6, flats=6)


def test_relative_minor () -> None:

	"""The relative minor is three half steps below the major tonic."""

	assert solfeo.keys.relative_minor(solfeo.notes.C) == solfeo.notes.A
	assert solfeo.keys.relative_minor(solfeo.notes.G) == solfeo.notes.E
	assert solfeo.keys.relative_minor(solfeo.notes.D_SHARP) == solfeo.notes.C
