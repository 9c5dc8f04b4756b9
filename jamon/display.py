"""ASCII step grid for a generated playback.

Renders a header line followed by one row for the bass and one row per drum
voice that hits at least once::

	Rock  100 BPM  Key: C  4/4  degree 1
	  bass        |O . O . O . O . O . O . O . O .|
	  bumbo       |X . . . . . . . X . . . . . . .|
	  caixa       |. . . . X . . . . . . . X . . .|
	  chimbal     |X . X . X . X . X . X . X . X .|

Rows are cut to fit the terminal width. Nothing is drawn when the terminal
is narrower than 40 columns.
"""

import shutil
import typing

import jamon.constants
import jamon.constants.drum_voices

if typing.TYPE_CHECKING:
	from jamon.playback import PlaybackDescriptor


_LABEL_WIDTH = 12
_MIN_TERMINAL_WIDTH = 40
_HIT = "X"
_NOTE = "O"
_REST = "."


class GridDisplay:

	"""Multi-line ASCII grid of a playback's bass and drum lanes."""

	def __init__ (self, playback: "PlaybackDescriptor") -> None:

		"""Store the playback to render.

		Parameters:
			playback: The descriptor returned by ``generate_random_playback()``.
		"""

		self._playback = playback
		self._lines: typing.List[str] = []

	@property
	def lines (self) -> typing.List[str]:

		"""Lines produced by the last ``build()``."""

		return list(self._lines)

	def build (self, term_width: typing.Optional[int] = None) -> None:

		"""Rebuild the grid lines for the given (or current) terminal width."""

		if term_width is None:
			term_width = shutil.get_terminal_size(fallback=(80, 24)).columns

		if term_width < _MIN_TERMINAL_WIDTH:
			self._lines = []
			return

		playback = self._playback
		display_cols = self._fit_columns(playback.step_count, term_width)

		lines = [self._format_header()]
		lines.append(self._render_row("bass", [_NOTE if v != jamon.constants.REST_MARKER else _REST for v in playback.bass_seq], display_cols))

		for voice in jamon.constants.drum_voices.DRUM_VOICES:
			lane = playback.bateria_seq.get(voice, [])
			if all(value == jamon.constants.REST_MARKER for value in lane):
				continue
			lines.append(self._render_row(voice, [_HIT if value == voice else _REST for value in lane], display_cols))

		self._lines = lines

	def render (self, term_width: typing.Optional[int] = None) -> str:

		"""Build the grid and return it as a single string."""

		self.build(term_width)
		return "\n".join(self._lines)

	def _format_header (self) -> str:
		playback = self._playback
		return f"{playback.groove_name}  {playback.bpm} BPM  Key: {playback.key}  {playback.meter}  degree {playback.degree}"

	@staticmethod
	def _render_row (name: str, cells: typing.List[str], display_cols: int) -> str:
		label = name[:_LABEL_WIDTH].ljust(_LABEL_WIDTH)
		return f"  {label}|{' '.join(cells[:display_cols])}|"

	@staticmethod
	def _fit_columns (grid_size: int, term_width: int) -> int:

		"""Determine how many grid columns fit in the terminal.

		Each column occupies 2 characters (char + space), plus the label
		prefix and pipe delimiters.
		"""

		overhead = 2 + _LABEL_WIDTH + 2
		available = term_width - overhead

		if available <= 0:
			return 0

		# Each column needs 2 chars (char + space), except the last needs 1.
		max_cols = (available + 1) // 2

		return min(grid_size, max_cols)
