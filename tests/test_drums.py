import pytest

import jamon.constants.drum_voices
import jamon.drums


def _active (hits: dict) -> set:
	return {voice for voice, hit in hits.items() if hit}


def test_decode_returns_all_voices () -> None:

	"""Every decode result has one flag per drum voice."""

	hits = jamon.drums.decode_drum_token("bch")
	assert tuple(hits) == jamon.constants.drum_voices.DRUM_VOICES


def test_decode_kick_and_hat () -> None:

	"""'bch' hits the kick and the hi-hat and nothing else."""

	hits = jamon.drums.decode_drum_token("bch")
	assert hits["bumbo"] is True
	assert hits["chimbal"] is True
	assert _active(hits) == {"bumbo", "chimbal"}


@pytest.mark.parametrize("token", [None, "", "-", "sm"])
def test_decode_rests (token) -> None:

	"""Rest tokens hit nothing."""

	assert _active(jamon.drums.decode_drum_token(token)) == set()


@pytest.mark.parametrize("token, expected", [
	("cch", {"caixa", "chimbal"}),
	("bco", {"bumbo", "conducao"}),
	("cco", {"caixa", "conducao"}),
	("bu", {"bumbo"}),
	("ba", {"bumbo"}),
	("b", {"bumbo"}),
	("ca", {"caixa"}),
	("ch", {"chimbal"}),
	("co", {"conducao"}),
	("to1", {"tom1"}),
	("to2", {"tom2"}),
	("su", {"surdo"}),
	("at", {"ataque"}),
])
def test_decode_single_tokens (token: str, expected: set) -> None:

	"""Each documented token hits exactly its voices."""

	assert _active(jamon.drums.decode_drum_token(token)) == expected


def test_decode_is_case_insensitive () -> None:

	"""Tokens are lowercased before matching."""

	assert _active(jamon.drums.decode_drum_token("BCH")) == {"bumbo", "chimbal"}
	assert _active(jamon.drums.decode_drum_token("To1")) == {"tom1"}


def test_decode_combines_multiple_rules () -> None:

	"""Substring rules are not exclusive; every matching rule applies."""

	hits = jamon.drums.decode_drum_token("bchcco")
	assert _active(hits) == {"bumbo", "chimbal", "caixa", "conducao"}


def test_decode_exact_rules_need_whole_token () -> None:

	"""Single-voice rules do not match inside longer tokens."""

	assert _active(jamon.drums.decode_drum_token("cax")) == set()
	assert _active(jamon.drums.decode_drum_token("tom1")) == set()


def test_decode_unknown_token () -> None:

	"""Unrecognised tokens hit nothing and do not raise."""

	assert _active(jamon.drums.decode_drum_token("zz")) == set()
	assert _active(jamon.drums.decode_drum_token("bo")) == set()


def test_build_lanes () -> None:

	"""Lanes carry the voice name on hits and 'x' elsewhere."""

	lanes = jamon.drums.build_drum_lanes(["bch", "-", "ca", "ch"])

	assert lanes["bumbo"] == ["bumbo", "x", "x", "x"]
	assert lanes["caixa"] == ["x", "x", "caixa", "x"]
	assert lanes["chimbal"] == ["chimbal", "x", "x", "chimbal"]
	assert lanes["surdo"] == ["x", "x", "x", "x"]
	assert set(lanes) == set(jamon.constants.drum_voices.DRUM_VOICES)


def test_build_lanes_empty () -> None:

	"""No tokens gives nine empty lanes."""

	lanes = jamon.drums.build_drum_lanes([])
	assert len(lanes) == 9
	assert all(lane == [] for lane in lanes.values())
