import typing

import jamon.constants


PatternInput = typing.Union[str, typing.Sequence[str], None]


def tokenize (patterns: PatternInput) -> typing.List[str]:

	"""
	Split one or more pattern strings into a flat token list.

	Strings in a list are joined with a space before splitting, so
	``["bo -", "x -"]`` and ``"bo - x -"`` tokenize the same way. Anything
	that is not a string or a list/tuple of strings yields no tokens.

	Example:
		```python
		tokenize(["bch - ch -"])       # → ["bch", "-", "ch", "-"]
		tokenize(["bo  -", "\\tx"])    # → ["bo", "-", "x"]
		tokenize(None)                 # → []
		```
	"""

	if isinstance(patterns, str):
		return patterns.split()

	if not isinstance(patterns, (list, tuple)):
		return []

	return " ".join(str(p) for p in patterns).split()


def expand_rhythm (patterns: PatternInput, total_steps: int) -> typing.List[str]:

	"""
	Repeat a token pattern cyclically until it fills ``total_steps`` steps.

	The pattern wraps as often as needed, and is cut short when it is longer
	than the requested length. An empty or malformed pattern produces rests
	(``"-"``) so callers always get exactly ``total_steps`` tokens back.

	Parameters:
		patterns: One or more space-separated token strings.
		total_steps: Number of steps to produce.

	Returns:
		A list of ``total_steps`` tokens (empty when ``total_steps <= 0``).

	Example:
		```python
		expand_rhythm(["a b"], 5)        # → ["a", "b", "a", "b", "a"]
		expand_rhythm(["a b c d"], 2)    # → ["a", "b"]
		expand_rhythm([], 3)             # → ["-", "-", "-"]
		```
	"""

	if total_steps <= 0:
		return []

	tokens = tokenize(patterns)

	if not tokens:
		return [jamon.constants.REST_TOKEN] * total_steps

	return [tokens[i % len(tokens)] for i in range(total_steps)]
