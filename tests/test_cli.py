import pathlib

import mido
import pytest

import solfeo.__main__


def _run (capsys: pytest.CaptureFixture, tmp_path: pathlib.Path, *argv: str) -> str:

	"""Run the CLI with a config path that does not exist and return stdout."""

	code = solfeo.__main__.main(["--config", str(tmp_path / "missing.yaml"), *argv])

	assert code == 0

	return capsys.readouterr().out.strip()


def test_scale (capsys: pytest.CaptureFixture, tmp_path: pathlib.Path) -> None:

	assert _run(capsys, tmp_path, "scale", "C") == "C D E F G A B C"
	assert _run(capsys, tmp_path, "--language", "es", "scale", "Do", "--type", "minor") == "Do Re Re# Fa Sol Sol# La# Do"


def test_chord (capsys: pytest.CaptureFixture, tmp_path: pathlib.Path) -> None:

	assert _run(capsys, tmp_path, "chord", "A", "--quality", "minor") == "Am: A C E"


def test_interval (capsys: pytest.CaptureFixture, tmp_path: pathlib.Path) -> None:

	assert _run(capsys, tmp_path, "interval", "C", "G") == "Perfect 5th (7 half steps)"


def test_midi_round_trip (capsys: pytest.CaptureFixture, tmp_path: pathlib.Path) -> None:

	assert _run(capsys, tmp_path, "midi", "Do") == "60"
	assert _run(capsys, tmp_path, "midi", "A", "--octave", "5") == "81"
	assert _run(capsys, tmp_path, "frommidi", "61") == "C#4"


def test_key (capsys: pytest.CaptureFixture, tmp_path: pathlib.Path) -> None:

	assert _run(capsys, tmp_path, "key", "G") == "sharps: 1, flats: -, relative minor: E"


def test_eval (capsys: pytest.CaptureFixture, tmp_path: pathlib.Path) -> None:

	assert _run(capsys, tmp_path, "eval", "D", "+ W + W - H") == "F"
	assert _run(capsys, tmp_path, "eval", "C", "+ X + W") == "D"


def test_eval_strict_failure (capsys: pytest.CaptureFixture, tmp_path: pathlib.Path) -> None:

	"""Strict evaluation of a bad step exits with status 1."""

	code = solfeo.__main__.main(["--config", str(tmp_path / "missing.yaml"), "eval", "C", "+ X", "--strict"])

	assert code == 1


def test_unknown_note_exits_with_usage_error (tmp_path: pathlib.Path) -> None:

	"""An unparseable note is an argument error (exit status 2)."""

	with pytest.raises(SystemExit) as exc_info:
		solfeo.__main__.main(["--config", str(tmp_path / "missing.yaml"), "scale", "Xyz"])

	assert exc_info.value.code == 2


def test_config_defaults (capsys: pytest.CaptureFixture, config_file: str) -> None:

	"""Language and octave come from the YAML config when not given."""

	assert solfeo.__main__.main(["--config", config_file, "midi", "C"]) == 0
	assert capsys.readouterr().out.strip() == "48"

	assert solfeo.__main__.main(["--config", config_file, "interval", "C", "G"]) == 0
	assert capsys.readouterr().out.strip() == "5ta Justa (7 half steps)"


def test_load_config_missing_file (tmp_path: pathlib.Path) -> None:

	"""A missing file falls back to the defaults."""

	assert solfeo.__main__.load_config(str(tmp_path / "nope.yaml")) == solfeo.__main__.DEFAULT_CONFIG


def test_load_config_empty_file (tmp_path: pathlib.Path) -> None:

	path = tmp_path / "empty.yaml"
	path.write_text("")

	assert solfeo.__main__.load_config(str(path)) == solfeo.__main__.DEFAULT_CONFIG


def test_export (capsys: pytest.CaptureFixture, config_file: str, tmp_path: pathlib.Path) -> None:

	"""Export writes a playable scale using the configured tempo and octave."""

	output = str(tmp_path / "re.mid")

	assert solfeo.__main__.main(["--config", config_file, "export", "Re", output]) == 0
	assert "Wrote 8 notes" in capsys.readouterr().out

	track = mido.MidiFile(output).tracks[0]

	assert track[0].tempo == mido.bpm2tempo(90)
	assert [m.note for m in track if m.type == "note_on"][0] == 50


def test_unknown_config_language_falls_back (capsys: pytest.CaptureFixture, tmp_path: pathlib.Path) -> None:

	"""An unsupported language in the config falls back to English instead of crashing."""

	path = tmp_path / "solfeo.yaml"
	path.write_text("language: fr\n")

	assert solfeo.__main__.load_config(str(path))["language"] == "en"

	assert solfeo.__main__.main(["--config", str(path), "scale", "C"]) == 0
	assert capsys.readouterr().out.strip() == "C D E F G A B C"

	assert solfeo.__main__.main(["--config", str(path), "--language", "es", "interval", "C", "G"]) == 0
	assert capsys.readouterr().out.strip() == "5ta Justa (7 half steps)"
