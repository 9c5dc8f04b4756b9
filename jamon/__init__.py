"""
JamOn - random bass and drum loops for a sample-based jam player.

Each call picks a musical style (Rock, Blues, Forro, Samba, Metal, Jazz, ...),
one of its chord progressions and a key, then writes a short loop as plain
step sequences: one bass lane of sample codes and nine drum lanes. The player
that consumes the loop owns timing, audio and animation; JamOn only decides
what plays on each step.

Building blocks:

- **Grooves.** ``jamon.groove.ALL_GROOVES`` - per-style meter, drum pattern,
  bass rhythm and bass scale degrees, written as space-separated tokens.
- **Rhythm expansion.** ``jamon.mini_notation.expand_rhythm()`` repeats a
  token pattern to any step count.
- **Drum decoding.** ``jamon.drums.decode_drum_token()`` turns ``"bch"`` into
  kick + hi-hat, ``"co"`` into ride, and so on.
- **Sample mapping.** ``jamon.samples.pick_sample_for_pitch_class()`` picks
  the middle-octave sample code for a pitch class.
- **Reproducible output.** Pass ``seed=`` or your own ``rng=`` to make every
  draw repeatable.

Minimal example:

    ```python
    import jamon

    playback = jamon.generate_random_playback(16, 100, seed=42)
    playback.groove_name    # e.g. "Samba"
    playback.to_dict()      # {"bpm": ..., "grooveName": ..., "bassSeq": [...], "bateriaSeq": {...}}
    ```

Package-level exports: ``generate_random_playback``, ``PlaybackDescriptor``, ``Groove``.
"""

import jamon.groove
import jamon.playback


generate_random_playback = jamon.playback.generate_random_playback
PlaybackDescriptor = jamon.playback.PlaybackDescriptor
Groove = jamon.groove.Groove
