"""Drum token decoding.

A drum pattern token names one or more voices that hit together on a step.
Decoding runs an ordered list of rules over the lowercased token; rules are
not exclusive, so a token such as ``"bchcco"`` fires every rule it matches.

Combination rules match anywhere in the token (``"bch"`` kick + hat,
``"cch"`` snare + hat, ``"bco"`` kick + ride, ``"cco"`` snare + ride).
Single-voice rules only match the whole token.
"""

import dataclasses
import typing

import jamon.constants
import jamon.constants.drum_voices as drum_voices


@dataclasses.dataclass(frozen=True)
class DrumRule:

	"""
	One decoding rule: if the token matches, every voice in ``voices`` hits.

	Parameters:
		patterns: Strings to look for in the lowercased token.
		voices: Drum voices switched on by a match.
		exact: Match the whole token instead of a substring.
	"""

	patterns: typing.Tuple[str, ...]
	voices: typing.Tuple[str, ...]
	exact: bool = False

	def matches (self, token: str) -> bool:

		"""Return True if the lowercased token satisfies this rule."""

		if self.exact:
			return token in self.patterns

		return any(pattern in token for pattern in self.patterns)


DRUM_RULES: typing.Tuple[DrumRule, ...] = (
	DrumRule(("bch",), (drum_voices.BUMBO, drum_voices.CHIMBAL)),
	DrumRule(("cch",), (drum_voices.CAIXA, drum_voices.CHIMBAL)),
	DrumRule(("bco",), (drum_voices.BUMBO, drum_voices.CONDUCAO)),
	DrumRule(("cco",), (drum_voices.CAIXA, drum_voices.CONDUCAO)),
	DrumRule(("bu", "ba", "b"), (drum_voices.BUMBO,), exact=True),
	DrumRule(("ca",), (drum_voices.CAIXA,), exact=True),
	DrumRule(("ch",), (drum_voices.CHIMBAL,), exact=True),
	DrumRule(("co",), (drum_voices.CONDUCAO,), exact=True),
	DrumRule(("to1",), (drum_voices.TOM_1,), exact=True),
	DrumRule(("to2",), (drum_voices.TOM_2,), exact=True),
	DrumRule(("su",), (drum_voices.SURDO,), exact=True),
	DrumRule(("at",), (drum_voices.ATAQUE,), exact=True),
)


def decode_drum_token (token: typing.Optional[str]) -> typing.Dict[str, bool]:

	"""
	Decode one drum token into hit flags for all nine voices.

	Every voice is present in the result and defaults to False. Rests
	(``"-"``, ``"sm"``, empty or None) and unrecognised tokens hit nothing.
	Matching ignores case.

	Example:
		```python
		hits = decode_drum_token("bch")
		hits["bumbo"], hits["chimbal"]   # → True, True
		hits["caixa"]                    # → False
		```
	"""

	hits = {voice: False for voice in drum_voices.DRUM_VOICES}

	if not token or token in jamon.constants.SUSTAIN_TOKENS:
		return hits

	normalized = str(token).lower()

	for rule in DRUM_RULES:
		if rule.matches(normalized):
			for voice in rule.voices:
				hits[voice] = True

	return hits


def build_drum_lanes (tokens: typing.Sequence[typing.Optional[str]]) -> typing.Dict[str, typing.List[str]]:

	"""
	Turn a step sequence of drum tokens into one lane per voice.

	Each lane has one value per step: the voice's own name where it hits,
	``"x"`` everywhere else.

	Example:
		```python
		lanes = build_drum_lanes(["bch", "-", "ca", "-"])
		lanes["bumbo"]   # → ["bumbo", "x", "x", "x"]
		lanes["caixa"]   # → ["x", "x", "caixa", "x"]
		```
	"""

	lanes = {voice: [jamon.constants.REST_MARKER] * len(tokens) for voice in drum_voices.DRUM_VOICES}

	for step, token in enumerate(tokens):
		for voice, hit in decode_drum_token(token).items():
			if hit:
				lanes[voice][step] = voice

	return lanes
