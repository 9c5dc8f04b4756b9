import random
import typing

import pytest

import jamon.groove


class FixedRandom (random.Random):

	"""Random source that replays a fixed list of floats from ``random()``."""

	def __init__ (self, values: typing.Sequence[float]) -> None:

		"""Store the values to replay, in order."""

		super().__init__(0)
		self.values = list(values)
		self.calls = 0

	def random (self) -> float:

		"""Return the next stored value, cycling when the list runs out."""

		value = self.values[self.calls % len(self.values)]
		self.calls += 1
		return value


def draw_for_index (index: int, count: int) -> float:

	"""Return a ``random()`` value that selects ``index`` out of ``count`` options."""

	return (index + 0.5) / count


def draws_for (groove_name: str, progression_index: int, key_index: int) -> typing.List[float]:

	"""Return the three draws that select a groove, one of its progressions and a key."""

	names = jamon.groove.groove_names()
	groove = jamon.groove.get_groove(groove_name)
	progressions = jamon.groove.progressions_for_style(groove.style)

	return [
		draw_for_index(names.index(groove_name), len(names)),
		draw_for_index(progression_index, len(progressions)),
		draw_for_index(key_index, 12),
	]


@pytest.fixture
def fixed_random () -> typing.Callable[[typing.Sequence[float]], FixedRandom]:

	"""Factory for random sources that replay the given values."""

	return FixedRandom
