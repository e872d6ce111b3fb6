"""
Solfeo - the music theory engine behind a game-based music theory course.

A small, stateless library over the 12 chromatic pitch classes. Every
operation is a pure function of its inputs and wraps, clamps or skips
instead of failing on odd input.

- **Notes.** ``Note`` values 0-11 with English and Spanish names in sharp
  and flat spellings, half/whole step movement and a forgiving parser
  (``Note.parse("Reb")``, ``Note.parse("c♯")``).
- **Scales and chords.** ``major_scale()``, ``minor_scale()`` and any
  step pattern via ``build_scale()``; triads and sevenths from root
  offsets via ``build_chord()``.
- **Intervals.** Directional half-step distance and interval names in
  both languages ("Perfect 5th" / "5ta Justa").
- **MIDI.** ``to_midi()`` / ``from_midi()`` with C4 = 60, plus ``mido``
  message and file export for hearing a scale in any DAW.
- **Key signatures.** Sharp/flat counts for the keys the lessons use and
  the relative minor.
- **Note math.** ``evaluate(D, "+ W + W - H")`` - the worksheet notation
  from the note calculator game.
- **Drills.** Seeded question generators for the practice games.

Minimal example:

    ```python
    import solfeo

    re = solfeo.Note.parse("Re")
    solfeo.evaluate(re, "+ W + W - H").spanish_name   # "Fa"
    [n.english_name for n in solfeo.major_scale(re)]  # D E F# G A B C# D
    ```

Package-level exports: ``Note``, ``build_scale``, ``major_scale``,
``minor_scale``, ``build_chord``, ``major_chord``, ``minor_chord``,
``half_steps_between``, ``interval_name``, ``to_midi``, ``from_midi``,
``sharps_in_key``, ``flats_in_key``, ``key_signature``, ``relative_minor``,
``evaluate``, ``evaluate_expression``, ``generate_note_math_questions``,
``generate_step_questions``.
"""

import solfeo.chords
import solfeo.drills
import solfeo.intervals
import solfeo.keys
import solfeo.midi
import solfeo.note_math
import solfeo.notes
import solfeo.scales


Note = solfeo.notes.Note
build_scale = solfeo.scales.build_scale
major_scale = solfeo.scales.major_scale
minor_scale = solfeo.scales.minor_scale
build_chord = solfeo.chords.build_chord
major_chord = solfeo.chords.major_chord
minor_chord = solfeo.chords.minor_chord
half_steps_between = solfeo.intervals.half_steps_between
interval_name = solfeo.intervals.interval_name
to_midi = solfeo.midi.to_midi
from_midi = solfeo.midi.from_midi
sharps_in_key = solfeo.keys.sharps_in_key
flats_in_key = solfeo.keys.flats_in_key
key_signature = solfeo.keys.key_signature
relative_minor = solfeo.keys.relative_minor
evaluate = solfeo.note_math.evaluate
evaluate_expression = solfeo.note_math.evaluate_expression
generate_note_math_questions = solfeo.drills.generate_note_math_questions
generate_step_questions = solfeo.drills.generate_step_questions
