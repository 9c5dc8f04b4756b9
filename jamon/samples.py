"""Pitch class to sample code mapping.

The catalog holds several samples for most pitch classes (one per octave).
The bass always plays the middle one, so lines stay in a comfortable range
whatever the key.

Module-level constants:
- ``PITCH_TO_CODES``: Maps each pitch class suffix to its catalog codes, in catalog order
- ``CODE_TO_PITCH``: Maps each catalog code back to its pitch class
"""

import re
import typing

import jamon.constants.samples


_CODE_PATTERN = re.compile(r"\d+(.*)")


def _parse_suffix (code: str) -> typing.Optional[str]:

	"""Strip the leading numeric index from a sample code."""

	match = _CODE_PATTERN.match(code)

	if match is None:
		return None

	return match.group(1)


def _build_pitch_map (codes: typing.Iterable[str]) -> typing.Dict[str, typing.Tuple[str, ...]]:

	"""Group sample codes by pitch class, keeping catalog order within each group."""

	grouped: typing.Dict[str, typing.List[str]] = {}

	for code in codes:
		suffix = _parse_suffix(code)
		if suffix is None:
			continue
		grouped.setdefault(suffix, []).append(code)

	return {suffix: tuple(group) for suffix, group in grouped.items()}


PITCH_TO_CODES: typing.Dict[str, typing.Tuple[str, ...]] = _build_pitch_map(jamon.constants.samples.VALID_SAMPLE_CODES)

CODE_TO_PITCH: typing.Dict[str, str] = {
	code: suffix
	for suffix, group in PITCH_TO_CODES.items()
	for code in group
}


def pick_sample_for_pitch_class (pitch_class: str) -> str:

	"""
	Return the canonical sample code for a pitch class.

	The canonical code is the middle entry of the catalog codes sharing the
	pitch class (index ``len // 2``). Unknown pitch classes get the fallback
	code rather than an error.

	Parameters:
		pitch_class: Pitch class name as spelled in the catalog (``"E"``, ``"FS"``).

	Example:
		```python
		pick_sample_for_pitch_class("E")   # → "25E"  (of 1E 13E 25E 37E 49E)
		pick_sample_for_pitch_class("A")   # → "30A"  (of 6A 18A 30A 42A)
		pick_sample_for_pitch_class("H")   # → "13E"
		```
	"""

	codes = PITCH_TO_CODES.get(pitch_class)

	if not codes:
		return jamon.constants.samples.FALLBACK_SAMPLE_CODE

	return codes[len(codes) // 2]


def sample_pitch_class (code: str) -> typing.Optional[str]:

	"""Return the pitch class of a catalog code, or None if the code is not in the catalog."""

	return CODE_TO_PITCH.get(code)
