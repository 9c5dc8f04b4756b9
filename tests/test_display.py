import conftest
import jamon.display
import jamon.playback


def _rock_playback (fixed_random) -> jamon.playback.PlaybackDescriptor:

	"""Generate the Rock loop in C used by these tests."""

	rng = fixed_random(conftest.draws_for("Rock", 0, 3))
	return jamon.playback.generate_random_playback(16, 100, rng=rng)


def test_grid_header_and_rows (fixed_random) -> None:

	"""The grid shows a header, the bass row and one row per active drum voice."""

	grid = jamon.display.GridDisplay(_rock_playback(fixed_random))
	grid.build(term_width=80)
	lines = grid.lines

	assert lines[0] == "Rock  100 BPM  Key: C  4/4  degree 1"
	assert lines[1] == "  bass        |O . O . O . O . O . O . O . O .|"
	assert lines[2] == "  bumbo       |X . . . . . . . X . . . . . . .|"
	assert lines[3] == "  caixa       |. . . . X . . . . . . . X . . .|"
	assert lines[4] == "  chimbal     |X . X . X . X . X . X . X . X .|"
	assert len(lines) == 5


def test_grid_fits_terminal (fixed_random) -> None:

	"""Rows are cut to the columns that fit the terminal."""

	grid = jamon.display.GridDisplay(_rock_playback(fixed_random))
	grid.build(term_width=40)

	# 40 - 16 overhead = 24 chars → 12 columns
	assert grid.lines[1] == "  bass        |O . O . O . O . O . O .|"


def test_grid_too_narrow (fixed_random) -> None:

	"""Nothing is drawn on very narrow terminals."""

	grid = jamon.display.GridDisplay(_rock_playback(fixed_random))
	assert grid.render(term_width=30) == ""
	assert grid.lines == []


def test_render_joins_lines (fixed_random) -> None:

	"""render() returns the built lines joined by newlines."""

	grid = jamon.display.GridDisplay(_rock_playback(fixed_random))
	text = grid.render(term_width=80)

	assert text.splitlines() == grid.lines
