"""Question generators for the practice games.

Each generator draws from an injectable ``random.Random`` so a seeded
generator produces the same round every time::

	rng = random.Random(42)
	questions = solfeo.drills.generate_note_math_questions(10, rng)

Scoring, lives and timers belong to the game layer and are not handled here.
"""

import dataclasses
import random
import typing

import solfeo.note_math
import solfeo.notes


# Equation tails for the note calculator, e.g. "Re + W + W - H = ?".
NOTE_MATH_TEMPLATES: typing.List[str] = [
	"+ H",
	"+ W",
	"- H",
	"- W",
	"+ W + H",
	"+ W + W",
	"+ W - H",
	"+ W + W - H",
	"- W - H",
	"+ H + H",
]

# Spoken instructions for the step bridge, with the signed shift each one asks for.
STEP_INSTRUCTIONS: typing.List[typing.Tuple[str, int]] = [
	("Un semitono más alto", 1),
	("Un semitono más bajo", -1),
	("Un tono más alto", 2),
	("Un tono más bajo", -2),
	("2 semitonos más alto", 2),
	("2 tonos más alto", 4),
	("3 semitonos más alto", 3),
	("2 semitonos más bajo", -2),
	("Un tono y medio más alto", 3),
]


@dataclasses.dataclass(frozen=True)
class NoteMathQuestion:

	"""
	A note calculator equation and its answer.
	"""

	equation: str
	start: solfeo.notes.Note
	operations: str
	answer: solfeo.notes.Note


@dataclasses.dataclass(frozen=True)
class StepQuestion:

	"""
	A step bridge instruction applied to a starting note.
	"""

	start: solfeo.notes.Note
	instruction: str
	half_steps: int
	answer: solfeo.notes.Note


Question = typing.Union[NoteMathQuestion, StepQuestion]


def _check_count (count: int) -> None:

	if count <= 0:
		raise ValueError("count must be positive")


def generate_note_math_questions (count: int, rng: typing.Optional[random.Random] = None, language: str = "es") -> typing.List[NoteMathQuestion]:

	"""Build ``count`` random note calculator questions.

	Parameters:
		count: Number of questions.
		rng: Random source (a fresh ``random.Random()`` if omitted).
		language: Language for the starting note name in the equation.

	Returns:
		Questions whose answers come from :func:`solfeo.note_math.evaluate`.
	"""

	_check_count(count)
	rng = rng or random.Random()

	questions: typing.List[NoteMathQuestion] = []

	for _ in range(count):
		start = rng.choice(solfeo.notes.ALL_NOTES)
		operations = rng.choice(NOTE_MATH_TEMPLATES)

		questions.append(NoteMathQuestion(
			equation=f"{start.name(language)} {operations}",
			start=start,
			operations=operations,
			answer=solfeo.note_math.evaluate(start, operations, strict=True),
		))

	return questions


def generate_step_questions (count: int, rng: typing.Optional[random.Random] = None) -> typing.List[StepQuestion]:

	"""Build ``count`` random step bridge questions."""

	_check_count(count)
	rng = rng or random.Random()

	questions: typing.List[StepQuestion] = []

	for _ in range(count):
		start = rng.choice(solfeo.notes.ALL_NOTES)
		instruction, half_steps = rng.choice(STEP_INSTRUCTIONS)

		questions.append(StepQuestion(
			start=start,
			instruction=instruction,
			half_steps=half_steps,
			answer=start.up(half_steps),
		))

	return questions


def random_target (rng: typing.Optional[random.Random] = None) -> solfeo.notes.Note:

	"""A note to find on the keyboard."""

	return (rng or random.Random()).choice(solfeo.notes.ALL_NOTES)


def check_answer (question: Question, answer: typing.Union[solfeo.notes.Note, str]) -> bool:

	"""True if ``answer`` is the right note. Strings are parsed first; unknown names are wrong."""

	if isinstance(answer, str):
		parsed = solfeo.notes.Note.parse(answer)
		return parsed is not None and parsed == question.answer

	return answer == question.answer
