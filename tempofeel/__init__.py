"""
tempofeel - tempo-adaptive swing humanization for recorded MIDI phrases.

A swing bass line or drum groove recorded at 120 BPM does not sound right
played back at 240 BPM, or at 60: real players swing less as the tempo rises,
lean ahead of the beat, play shorter and even out their dynamics. tempofeel
re-renders a phrase for any target tempo so a small library of fixed patterns
sounds idiomatic across the whole tempo range.

- **Calibrated profiles.** A ``SwingProfile`` holds seven curves (swing ratio,
  forward lean, legato, accent, velocity compression, microtiming, jitter)
  calibrated at 50, 120, 190 and 240 BPM and interpolated in between. One
  ``intensity`` dial scales the whole feel.
- **Bass and drums adapters.** ``SwingBassTempoAdapter`` also reshapes note
  durations. ``SwingDrumsTempoAdapter`` never touches durations and lets each
  drum voice lean ahead by its own amount.
- **Atomic edits.** All changed notes are swapped into the phrase in one step.
- **Reproducible.** Jitter comes from an injectable ``random.Random``.

Minimal example:

    ```python
    import random
    import tempofeel

    profile = tempofeel.SwingProfile.create(intensity=1.0)
    adapter = tempofeel.SwingBassTempoAdapter(profile, tempofeel.FOUR_FOUR, rng=random.Random(1))

    phrase = tempofeel.Phrase(channel=1)
    phrase.add(tempofeel.NoteEvent(pitch=41, velocity=90, position=0.0, duration=0.9))
    phrase.add(tempofeel.NoteEvent(pitch=43, velocity=70, position=0.667, duration=0.3))

    adapter.adapt_to_tempo(phrase, None, None, tempo=200)
    ```

Package-level exports: ``NoteEvent``, ``Phrase``, ``BeatRange``,
``TimeSignature``, ``FOUR_FOUR``, ``DrumKeyMap``, ``DrumSubset``,
``SwingProfile``, ``SwingBassTempoAdapter``, ``SwingDrumsTempoAdapter``.
"""

import tempofeel.bass_adapter
import tempofeel.beat_range
import tempofeel.drum_kit
import tempofeel.drums_adapter
import tempofeel.note_event
import tempofeel.phrase
import tempofeel.swing_profile
import tempofeel.time_signature


NoteEvent = tempofeel.note_event.NoteEvent
Phrase = tempofeel.phrase.Phrase
BeatRange = tempofeel.beat_range.BeatRange
TimeSignature = tempofeel.time_signature.TimeSignature
FOUR_FOUR = tempofeel.time_signature.FOUR_FOUR
DrumKeyMap = tempofeel.drum_kit.DrumKeyMap
DrumSubset = tempofeel.drum_kit.DrumSubset
SwingProfile = tempofeel.swing_profile.SwingProfile
SwingBassTempoAdapter = tempofeel.bass_adapter.SwingBassTempoAdapter
SwingDrumsTempoAdapter = tempofeel.drums_adapter.SwingDrumsTempoAdapter
