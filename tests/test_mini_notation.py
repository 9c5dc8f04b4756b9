import jamon.mini_notation


def test_tokenize_joins_patterns ():

	"""Multiple pattern strings tokenize as one space-joined string."""

	assert jamon.mini_notation.tokenize(["bo -", "x  sm"]) == ["bo", "-", "x", "sm"]
	assert jamon.mini_notation.tokenize("bch\t- ch") == ["bch", "-", "ch"]


def test_tokenize_malformed_input ():

	"""Non-string, non-list input has no tokens."""

	assert jamon.mini_notation.tokenize(None) == []
	assert jamon.mini_notation.tokenize(42) == []
	assert jamon.mini_notation.tokenize([]) == []


def test_expand_wraps_cyclically ():

	"""A short pattern repeats until the step count is reached."""

	assert jamon.mini_notation.expand_rhythm(["a b"], 5) == ["a", "b", "a", "b", "a"]


def test_expand_truncates_long_pattern ():

	"""A pattern longer than the step count is cut short."""

	assert jamon.mini_notation.expand_rhythm(["a b c d e"], 3) == ["a", "b", "c"]


def test_expand_exact_length ():

	"""A pattern of exactly the step count is returned unchanged."""

	assert jamon.mini_notation.expand_rhythm(["a b c d"], 4) == ["a", "b", "c", "d"]


def test_expand_empty_pattern_is_rests ():

	"""Empty or malformed patterns produce rests of the requested length."""

	assert jamon.mini_notation.expand_rhythm([], 3) == ["-", "-", "-"]
	assert jamon.mini_notation.expand_rhythm(None, 2) == ["-", "-"]
	assert jamon.mini_notation.expand_rhythm(["   "], 2) == ["-", "-"]


def test_expand_non_positive_steps ():

	"""Zero or negative step counts produce nothing."""

	assert jamon.mini_notation.expand_rhythm(["a b"], 0) == []
	assert jamon.mini_notation.expand_rhythm(["a b"], -4) == []


def test_expand_single_string ():

	"""A bare string works like a one-element list."""

	assert jamon.mini_notation.expand_rhythm("bo -", 3) == ["bo", "-", "bo"]
