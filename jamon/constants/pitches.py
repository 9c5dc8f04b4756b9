"""Pitch class and scale degree tables.

Pitch classes are spelled the way the sample catalog spells them, with ``S``
for sharp (``"CS"`` is C#). The list order starts on A and defines semitone
distance by index, so ``PITCH_CLASSES[(i + 7) % 12]`` is a fifth above
``PITCH_CLASSES[i]``.
"""

import typing


PITCH_CLASSES: typing.Tuple[str, ...] = (
	"A",
	"AS",
	"B",
	"C",
	"CS",
	"D",
	"DS",
	"E",
	"F",
	"FS",
	"G",
	"GS",
)


# Chord root of each degree of the major key (I-VII), in semitones above the tonic.
DEGREE_TO_ROOT: typing.Dict[int, int] = {
	1: 0,
	2: 2,
	3: 4,
	4: 5,
	5: 7,
	6: 9,
	7: 11,
}


# Major scale steps 1-8 in semitones. Degree 8 is the octave.
MAJOR_SCALE_OFFSETS: typing.Dict[int, int] = {
	1: 0,
	2: 2,
	3: 4,
	4: 5,
	5: 7,
	6: 9,
	7: 11,
	8: 12,
}
