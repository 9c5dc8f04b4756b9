"""Playable sample catalog.

Each code is a running index followed by a pitch class suffix (``"13E"`` is
the thirteenth sample, an E). The catalog spans four octaves from E to E and
is shared with the sample player, so every generated bass note must be one
of these codes.
"""

import typing


VALID_SAMPLE_CODES: typing.Tuple[str, ...] = (
	"1E", "2F", "3FS", "4G", "5GS", "6A", "7AS", "8B",
	"9C", "10CS", "11D", "12DS", "13E", "14F", "15FS", "16G",
	"17GS", "18A", "19AS", "20B", "21C", "22CS", "23D", "24DS",
	"25E", "26F", "27FS", "28G", "29GS", "30A", "31AS", "32B",
	"33C", "34CS", "35D", "36DS", "37E", "38F", "39FS", "40G",
	"41GS", "42A", "43AS", "44B", "45C", "46CS", "47D", "48DS", "49E",
)

# Used when a pitch class has no sample (close to the middle of the range).
FALLBACK_SAMPLE_CODE = "13E"
