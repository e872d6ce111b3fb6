"""Command line front end.

Usage::

    python -m solfeo scale Re --type minor
    python -m solfeo interval C G
    python -m solfeo eval D "+ W + W - H"
    python -m solfeo export Do c_major.mid

Defaults (``language``, ``octave``, ``velocity``, ``bpm``) are read from
``solfeo.yaml`` in the working directory when it exists, or from the file
given with ``--config``.
"""

import argparse
import logging
import os
import sys
import typing

import yaml

import solfeo.chords
import solfeo.intervals
import solfeo.keys
import solfeo.midi
import solfeo.note_math
import solfeo.notes
import solfeo.scales


logger = logging.getLogger(__name__)

DEFAULT_CONFIG: typing.Dict[str, typing.Any] = {
	"language": "en",
	"octave": solfeo.midi.MIDDLE_C_OCTAVE,
	"velocity": 100,
	"bpm": 120,
}


def load_config (config_path: str = 'solfeo.yaml') -> dict:

	"""
	Load configuration from a YAML file, merged over ``DEFAULT_CONFIG``.

	An unsupported ``language`` is replaced by the default with a warning.
	"""

	config = dict(DEFAULT_CONFIG)

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return config

	with open(config_path, 'r') as f:
		config.update(yaml.safe_load(f) or {})

	if config["language"] not in solfeo.notes.LANGUAGES:
		logger.warning(
			f"Unknown language {config['language']!r} in {config_path}. "
			f"Expected one of {list(solfeo.notes.LANGUAGES)}; using {DEFAULT_CONFIG['language']!r}."
		)
		config["language"] = DEFAULT_CONFIG["language"]

	return config


def _note_arg (text: str) -> solfeo.notes.Note:

	"""argparse type for note names."""

	note = solfeo.notes.Note.parse(text)

	if note is None:
		raise argparse.ArgumentTypeError(f"unknown note name: {text!r}")

	return note


def _names (notes: typing.Sequence[solfeo.notes.Note], language: str) -> str:
	return " ".join(note.name(language) for note in notes)


def build_parser () -> argparse.ArgumentParser:

	"""Argument parser with one subcommand per engine operation."""

	parser = argparse.ArgumentParser(prog="solfeo", description="Music theory calculator")
	parser.add_argument("--config", default="solfeo.yaml", help="YAML config file (default: solfeo.yaml)")
	parser.add_argument("--language", choices=solfeo.notes.LANGUAGES, help="Note and interval name language")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

	commands = parser.add_subparsers(dest="command", required=True)

	scale = commands.add_parser("scale", help="Build a scale")
	scale.add_argument("root", type=_note_arg)
	scale.add_argument("--type", default="major", choices=solfeo.scales.scale_names())

	chord = commands.add_parser("chord", help="Build a chord")
	chord.add_argument("root", type=_note_arg)
	chord.add_argument("--quality", default="major", choices=sorted(solfeo.chords.CHORD_OFFSETS))

	interval = commands.add_parser("interval", help="Name the ascending interval between two notes")
	interval.add_argument("start", type=_note_arg)
	interval.add_argument("end", type=_note_arg)

	midi = commands.add_parser("midi", help="Convert a note to a MIDI pitch")
	midi.add_argument("note", type=_note_arg)
	midi.add_argument("--octave", type=int)

	from_midi = commands.add_parser("frommidi", help="Convert a MIDI pitch to a note and octave")
	from_midi.add_argument("pitch", type=int)

	key = commands.add_parser("key", help="Key signature and relative minor of a major key")
	key.add_argument("root", type=_note_arg)

	evaluate = commands.add_parser("eval", help="Evaluate note math, e.g. eval D \"+ W + W - H\"")
	evaluate.add_argument("start", type=_note_arg)
	evaluate.add_argument("operations")
	evaluate.add_argument("--strict", action="store_true", help="Reject unknown steps instead of skipping them")

	export = commands.add_parser("export", help="Write a scale to a MIDI file")
	export.add_argument("root", type=_note_arg)
	export.add_argument("output")
	export.add_argument("--type", default="major", choices=solfeo.scales.scale_names())
	export.add_argument("--octave", type=int)

	return parser


def run (args: argparse.Namespace, config: dict) -> str:

	"""Execute a parsed command and return the text to print."""

	language = args.language or config["language"]

	if args.command == "scale":
		return _names(solfeo.scales.scale(args.root, args.type), language)

	if args.command == "chord":
		notes = solfeo.chords.chord(args.root, args.quality)
		return f"{solfeo.chords.chord_symbol(args.root, args.quality)}: {_names(notes, language)}"

	if args.command == "interval":
		steps = solfeo.intervals.half_steps_between(args.start, args.end)
		return f"{solfeo.intervals.interval_name(args.start, args.end, language)} ({steps} half steps)"

	if args.command == "midi":
		octave = config["octave"] if args.octave is None else args.octave
		return str(solfeo.midi.to_midi(args.note, octave))

	if args.command == "frommidi":
		note, octave = solfeo.midi.from_midi(args.pitch)
		return f"{note.name(language)}{octave}"

	if args.command == "key":
		signature = solfeo.keys.key_signature(args.root)
		minor = solfeo.keys.relative_minor(args.root)
		sharps = "-" if signature.sharps is None else signature.sharps
		flats = "-" if signature.flats is None else signature.flats
		return f"sharps: {sharps}, flats: {flats}, relative minor: {minor.name(language)}"

	if args.command == "eval":
		return solfeo.note_math.evaluate(args.start, args.operations, strict=args.strict).name(language)

	if args.command == "export":
		octave = config["octave"] if args.octave is None else args.octave
		notes = solfeo.scales.scale(args.root, args.type)
		messages = solfeo.midi.note_messages(notes, octave=octave, velocity=config["velocity"])
		solfeo.midi.write_midi_file(messages, args.output, bpm=config["bpm"])
		return f"Wrote {len(notes)} notes to {args.output}"

	raise ValueError(f"Unknown command: {args.command}")


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the solfeo command line.
	"""

	args = build_parser().parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	config = load_config(args.config)

	try:
		print(run(args, config))
	except solfeo.note_math.NoteMathError as e:
		logger.error(str(e))
		return 1

	return 0


if __name__ == "__main__":
	sys.exit(main())
