"""Pitch-class notes and their display names.

A ``Note`` is one of the 12 chromatic pitch classes, stored as an integer
0-11 (0 = C / Do, 11 = B / Si). Sharp spelling is canonical; flat spellings
are available for the five black keys.

Module-level constants:
- ``C``, ``C_SHARP``, ``D`` ... ``B``: one ``Note`` per pitch class
- ``ALL_NOTES``: all 12 notes in ascending order
- ``WHITE_KEYS``: the 7 natural notes
- ``HALF_STEP`` / ``WHOLE_STEP``: step sizes in semitones

Example:
	```python
	import solfeo.notes

	re = solfeo.notes.Note.parse("Re")
	re.up(2).spanish_name     # "Mi"
	solfeo.notes.Note.parse("Reb") == solfeo.notes.C_SHARP  # True
	```
"""

import dataclasses
import typing


HALF_STEP = 1
WHOLE_STEP = 2

NOTE_COUNT = 12

LANGUAGES: typing.Tuple[str, ...] = ("en", "es")

ENGLISH_NAMES: typing.List[str] = [
	"C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B",
]

SPANISH_NAMES: typing.List[str] = [
	"Do", "Do#", "Re", "Re#", "Mi", "Fa", "Fa#", "Sol", "Sol#", "La", "La#", "Si",
]

ENGLISH_FLATS: typing.List[str] = [
	"C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B",
]

SPANISH_FLATS: typing.List[str] = [
	"Do", "Reb", "Re", "Mib", "Mi", "Fa", "Solb", "Sol", "Lab", "La", "Sib", "Si",
]

BLACK_KEYS: typing.FrozenSet[int] = frozenset({1, 3, 6, 8, 10})


def wrap (value: int, modulus: int = NOTE_COUNT) -> int:

	"""Return ``value`` reduced into ``[0, modulus)``, never negative.

	Example:
		```python
		wrap(-1)   # 11
		wrap(26)   # 2
		```
	"""

	return value % modulus


@dataclasses.dataclass(frozen=True)
class Note:

	"""
	A chromatic pitch class (0 = C, 1 = C#/Db, ... 11 = B).

	Notes are immutable values: stepping returns a new ``Note``.
	"""

	value: int

	def __post_init__ (self) -> None:
		if isinstance(self.value, bool) or not isinstance(self.value, int):
			raise TypeError(f"Note value must be an int, got {self.value!r}")
		if not 0 <= self.value < NOTE_COUNT:
			raise ValueError(f"Note value must be between 0 and 11, got {self.value}")


	def up (self, half_steps: int) -> "Note":

		"""Move up by ``half_steps`` semitones (any integer, wrapped modulo 12)."""

		return Note(wrap(self.value + half_steps))


	def down (self, half_steps: int) -> "Note":

		"""Move down by ``half_steps`` semitones (any integer, wrapped modulo 12)."""

		return Note(wrap(self.value - half_steps))


	def up_whole (self, whole_steps: int) -> "Note":

		"""Move up by whole steps."""

		return self.up(whole_steps * WHOLE_STEP)


	def down_whole (self, whole_steps: int) -> "Note":

		"""Move down by whole steps."""

		return self.down(whole_steps * WHOLE_STEP)


	@property
	def english_name (self) -> str:
		return ENGLISH_NAMES[self.value]


	@property
	def spanish_name (self) -> str:
		return SPANISH_NAMES[self.value]


	@property
	def english_flat (self) -> str:

		"""Flat spelling for black keys (``"Db"``), standard name otherwise."""

		return ENGLISH_FLATS[self.value]


	@property
	def spanish_flat (self) -> str:

		"""Flat spelling for black keys (``"Reb"``), standard name otherwise."""

		return SPANISH_FLATS[self.value]


	@property
	def is_black_key (self) -> bool:
		return self.value in BLACK_KEYS


	@property
	def enharmonic_name (self) -> str:

		"""English flat spelling if this is a black key, else the English name."""

		return self.english_flat if self.is_black_key else self.english_name


	@property
	def enharmonic_spanish (self) -> str:
		return self.spanish_flat if self.is_black_key else self.spanish_name


	def name (self, language: str = "en") -> str:

		"""Return the sharp-spelling name in ``"en"`` or ``"es"``.

		Raises:
			ValueError: If ``language`` is not one of ``LANGUAGES``.
		"""

		if language == "en":
			return self.english_name

		if language == "es":
			return self.spanish_name

		raise ValueError(f"Unknown language: {language!r}. Available: {list(LANGUAGES)}")


	def __str__ (self) -> str:
		return self.english_name


	@staticmethod
	def parse (text: str) -> typing.Optional["Note"]:

		"""Parse a note name in any supported spelling.

		Matching is case-insensitive and ignores surrounding whitespace. English
		and Spanish names are accepted in both sharp and flat spellings, and the
		Unicode ``♯`` / ``♭`` glyphs are treated as ``#`` / ``b``.

		Parameters:
			text: A note name such as ``"C#"``, ``"db"``, ``"Sol"`` or ``"Si♭"``.

		Returns:
			The matching ``Note``, or ``None`` when nothing matches.

		Example:
			```python
			Note.parse("c#") == Note.parse("Db") == Note.parse("Reb")  # True
			Note.parse("H")  # None
			```
		"""

		cleaned = text.strip().replace("♯", "#").replace("♭", "b").lower()

		return _NAME_LOOKUP.get(cleaned)


def _build_name_lookup () -> typing.Dict[str, Note]:

	"""Map every lower-cased spelling of every note to its ``Note``."""

	lookup: typing.Dict[str, Note] = {}

	for value in range(NOTE_COUNT):
		note = Note(value)
		for table in (ENGLISH_NAMES, SPANISH_NAMES, ENGLISH_FLATS, SPANISH_FLATS):
			lookup[table[value].lower()] = note

	return lookup


_NAME_LOOKUP: typing.Dict[str, Note] = _build_name_lookup()


C = Note(0)
C_SHARP = Note(1)
D = Note(2)
D_SHARP = Note(3)
E = Note(4)
F = Note(5)
F_SHARP = Note(6)
G = Note(7)
G_SHARP = Note(8)
A = Note(9)
A_SHARP = Note(10)
B = Note(11)

ALL_NOTES: typing.List[Note] = [Note(value) for value in range(NOTE_COUNT)]

WHITE_KEYS: typing.List[Note] = [note for note in ALL_NOTES if not note.is_black_key]
