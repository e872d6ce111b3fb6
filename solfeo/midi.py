"""MIDI pitch mapping and export.

Pitch numbers follow the usual convention of **C4 = 60** (Middle C), so
``pitch = (octave + 1) * 12 + note.value``. Conversions saturate at the
ends of the 0-127 range rather than raising or wrapping.

The export helpers turn note sequences into ``mido`` messages and standard
MIDI files, e.g. to hear a lesson's scale in a DAW::

	messages = solfeo.midi.note_messages(solfeo.scales.major_scale(solfeo.notes.C))
	solfeo.midi.write_midi_file(messages, "c_major.mid")
"""

import logging
import typing

import mido

import solfeo.intervals
import solfeo.notes


logger = logging.getLogger(__name__)

MIDI_MIN = 0
MIDI_MAX = 127
MIDDLE_C_OCTAVE = 4

# Matches the resolution used by most DAWs.
TICKS_PER_BEAT = 480


def clamp_pitch (pitch: int) -> int:

	"""Saturate ``pitch`` into the valid MIDI range."""

	return max(MIDI_MIN, min(MIDI_MAX, pitch))


def to_midi (note: solfeo.notes.Note, octave: int = MIDDLE_C_OCTAVE) -> int:

	"""Convert a note and octave to a MIDI pitch, clamped to 0-127.

	Example:
		```python
		to_midi(solfeo.notes.C)            # 60
		to_midi(solfeo.notes.A, octave=4)  # 69
		to_midi(solfeo.notes.B, octave=20) # 127 (saturated)
		```
	"""

	return clamp_pitch((octave + 1) * solfeo.notes.NOTE_COUNT + note.value)


def from_midi (pitch: int) -> typing.Tuple[solfeo.notes.Note, int]:

	"""Convert a MIDI pitch to ``(note, octave)``.

	Out-of-range input is clamped first, so ``from_midi(200)`` decodes as 127.
	"""

	pitch = clamp_pitch(pitch)

	return solfeo.notes.Note(pitch % solfeo.notes.NOTE_COUNT), pitch // solfeo.notes.NOTE_COUNT - 1


def ascending_pitches (notes: typing.Sequence[solfeo.notes.Note], octave: int = MIDDLE_C_OCTAVE) -> typing.List[int]:

	"""MIDI pitches for ``notes`` with each one placed above the last.

	The first note sits in ``octave``; later notes climb by their scale
	distance, so ``[C, D, ..., B, C]`` ends an octave above where it started.
	"""

	if not notes:
		return []

	base = (octave + 1) * solfeo.notes.NOTE_COUNT + notes[0].value

	return [clamp_pitch(base + step) for step in solfeo.intervals.scale_steps(notes)]


def note_messages (
	notes: typing.Sequence[solfeo.notes.Note],
	octave: int = MIDDLE_C_OCTAVE,
	velocity: int = 100,
	ticks: int = TICKS_PER_BEAT,
	channel: int = 0
) -> typing.List[mido.Message]:

	"""Messages that play ``notes`` one after another.

	Parameters:
		notes: Notes in playing order.
		octave: Octave of the first note.
		velocity: Note-on velocity (0-127).
		ticks: Length of each note in ticks.
		channel: MIDI channel (0-15).

	Returns:
		Alternating ``note_on`` / ``note_off`` messages with delta times.
	"""

	messages: typing.List[mido.Message] = []

	for pitch in ascending_pitches(notes, octave):
		messages.append(mido.Message('note_on', channel=channel, note=pitch, velocity=velocity, time=0))
		messages.append(mido.Message('note_off', channel=channel, note=pitch, velocity=0, time=ticks))

	return messages


def chord_messages (
	notes: typing.Sequence[solfeo.notes.Note],
	octave: int = MIDDLE_C_OCTAVE,
	velocity: int = 100,
	ticks: int = TICKS_PER_BEAT * 2,
	channel: int = 0
) -> typing.List[mido.Message]:

	"""Messages that sound ``notes`` together for ``ticks``."""

	pitches = ascending_pitches(notes, octave)

	on = [mido.Message('note_on', channel=channel, note=pitch, velocity=velocity, time=0) for pitch in pitches]
	off = [
		mido.Message('note_off', channel=channel, note=pitch, velocity=0, time=ticks if i == 0 else 0)
		for i, pitch in enumerate(pitches)
	]

	return on + off


def write_midi_file (messages: typing.Sequence[mido.Message], filename: str, bpm: float = 120) -> mido.MidiFile:

	"""Write messages to a single-track standard MIDI file.

	Message ``time`` values are read as delta ticks at ``TICKS_PER_BEAT``.
	A tempo meta message is written first. Errors while saving propagate.

	Returns:
		The ``mido.MidiFile`` that was saved.
	"""

	mid = mido.MidiFile(type=1)
	mid.ticks_per_beat = TICKS_PER_BEAT

	track = mido.MidiTrack()
	mid.tracks.append(track)

	track.append(mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(bpm), time=0))

	for message in messages:
		track.append(message.copy())

	mid.save(filename)
	logger.info(f"Saved {len(messages)} MIDI messages to {filename}")

	return mid
