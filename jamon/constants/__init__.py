"""Constants for JamOn.

This package contains the static tables the generator reads:

- ``jamon.constants.pitches`` - Pitch class names and degree-to-semitone offsets
- ``jamon.constants.samples`` - The catalog of playable sample codes
- ``jamon.constants.drum_voices`` - Names of the nine drum lanes

Step markers and generator defaults are defined here directly.
"""

# Value written to an output lane when nothing new happens on a step.
REST_MARKER = "x"

# Rhythm tokens that mean "no new event" inside a pattern string.
REST_TOKEN = "-"
SUSTAIN_TOKENS = ("-", "sm")

DEFAULT_STEP_COUNT = 16
DEFAULT_BPM = 100
