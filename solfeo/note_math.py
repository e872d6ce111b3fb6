"""Note-math expressions.

Note math is the worksheet notation used in the lessons: a starting note
followed by signed steps, evaluated strictly left to right.

**Syntax:**
- `+ H` / `- H`: up or down a half step.
- `+ W` / `- W`: up or down a whole step (2 half steps).
- `+ 3(W)`: a multiplied step (here 6 half steps). Any run of ASCII digits
  works; ``0(W)`` moves nothing and is rejected in strict mode.
- Whitespace around signs and steps is optional and steps are case-insensitive.

By default anything that is not a recognised step is skipped and leaves the
running note unchanged. Pass ``strict=True`` to raise ``NoteMathError``
instead.

Example:
	```python
	evaluate(solfeo.notes.D, "+ W + W - H")   # F
	evaluate(solfeo.notes.C, "+3(W)")         # F#
	evaluate_expression("Do + W + W - H")     # D# (Re#)
	```
"""

import dataclasses
import logging
import re
import typing

import solfeo.notes


logger = logging.getLogger(__name__)

SIGNS: typing.Dict[str, int] = {"+": 1, "-": -1}

STEP_SIZES: typing.Dict[str, int] = {
	"H": solfeo.notes.HALF_STEP,
	"W": solfeo.notes.WHOLE_STEP,
}

# ASCII digits only: str patterns would otherwise accept any Unicode decimal.
_MULTIPLIED_STEP = re.compile(r"([0-9]+)\(([HW])\)")
_FIRST_SIGN = re.compile(r"[+-]")

# Longer counts are reduced modulo 12 as they are read.
MAX_COUNT_DIGITS = 6


class NoteMathError (ValueError):
	pass


@dataclasses.dataclass(frozen=True)
class StepTerm:

	"""
	One signed step of an expression.
	"""

	sign: int
	half_steps: int
	token: str

	@property
	def offset (self) -> int:
		return self.sign * self.half_steps


def _count (digits: str) -> int:

	"""Multiplier value of a digit string.

	Counts longer than ``MAX_COUNT_DIGITS`` only keep their value modulo 12,
	which moves a note to the same place.
	"""

	if len(digits) <= MAX_COUNT_DIGITS:
		return int(digits)

	count = 0

	for digit in digits:
		count = (count * 10 + int(digit)) % solfeo.notes.NOTE_COUNT

	return count


def _is_zero_count (token: str) -> bool:

	match = _MULTIPLIED_STEP.fullmatch(token.strip().upper())

	return match is not None and match.group(1).strip("0") == ""


def step_size (token: str) -> typing.Optional[int]:

	"""Half steps for a step token (``"H"``, ``"w"``, ``"3(W)"``), or ``None`` if malformed.

	A zero count such as ``"0(W)"`` fits the notation and gives 0 half steps;
	strict parsing rejects it.
	"""

	token = token.strip().upper()

	if token in STEP_SIZES:
		return STEP_SIZES[token]

	match = _MULTIPLIED_STEP.fullmatch(token)

	if match is None:
		return None

	return _count(match.group(1)) * STEP_SIZES[match.group(2)]


def _tokenize (operations: str) -> typing.List[str]:

	"""
	Split an operations string into signs and step tokens.
	"+W -2(H)" -> ["+", "W", "-", "2(H)"]
	"""

	for sign in SIGNS:
		operations = operations.replace(sign, f" {sign} ")

	return operations.split()


def parse_terms (operations: str, strict: bool = False) -> typing.List[StepTerm]:

	"""Parse an operations string into signed step terms.

	A sign always takes the token after it as its step, even when that token
	is malformed (or is itself a sign). Tokens without a sign and a trailing
	sign with nothing after it are ignored.

	Parameters:
		operations: Signed steps, e.g. ``"+ W + W - H"``.
		strict: Raise ``NoteMathError`` instead of skipping bad tokens.

	Returns:
		The recognised terms in order.
	"""

	tokens = _tokenize(operations)
	terms: typing.List[StepTerm] = []
	i = 0

	while i < len(tokens):

		token = tokens[i]

		if token not in SIGNS:
			if strict:
				raise NoteMathError(f"Expected '+' or '-' before {token!r}")
			logger.debug(f"Skipping unsigned token {token!r}")
			i += 1
			continue

		if i + 1 >= len(tokens):
			if strict:
				raise NoteMathError(f"Sign {token!r} has no step after it")
			logger.debug(f"Skipping trailing sign {token!r}")
			break

		step = tokens[i + 1]
		half_steps = step_size(step)

		if half_steps is None:
			if strict:
				raise NoteMathError(f"Unknown step {step!r}. Expected H, W, or N(H) / N(W)")
			logger.debug(f"Skipping unknown step {step!r}")
		elif strict and _is_zero_count(step):
			raise NoteMathError(f"Step count in {step!r} must be positive")
		else:
			terms.append(StepTerm(sign=SIGNS[token], half_steps=half_steps, token=step))

		i += 2

	return terms


def evaluate (start: solfeo.notes.Note, operations: str, strict: bool = False) -> solfeo.notes.Note:

	"""Apply signed steps to ``start`` from left to right.

	Parameters:
		start: The starting note.
		operations: Signed steps, e.g. ``"+ W + W - H"``.
		strict: Raise ``NoteMathError`` on malformed input instead of skipping it.

	Returns:
		The note reached after every recognised step.

	Example:
		```python
		evaluate(solfeo.notes.C, "+ X + W")  # D - the X is skipped
		```
	"""

	current = start

	for term in parse_terms(operations, strict=strict):
		current = current.up(term.half_steps) if term.sign > 0 else current.down(term.half_steps)

	return current


def evaluate_expression (expression: str, strict: bool = False) -> typing.Optional[solfeo.notes.Note]:

	"""Evaluate an expression that names its own starting note.

	Everything before the first sign is parsed with ``Note.parse``, so both
	``"Do + W"`` and ``"C#-H"`` work.

	Returns:
		The resulting note, or ``None`` when the starting note is not
		recognised (``strict=True`` raises ``NoteMathError`` instead).
	"""

	match = _FIRST_SIGN.search(expression)
	head = expression[:match.start()] if match else expression
	operations = expression[match.start():] if match else ""

	start = solfeo.notes.Note.parse(head)

	if start is None:
		if strict:
			raise NoteMathError(f"Unknown starting note {head.strip()!r}")
		return None

	return evaluate(start, operations, strict=strict)
