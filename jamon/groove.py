"""Style grooves and chord progressions.

A groove is the rhythmic template for one style: its meter, a drum pattern
and a bass rhythm written as space-separated tokens, and the scale degrees
the bass walks through. Each style also owns a list of chord progressions
written as degrees of the major key.

Module-level constants:
- ``STYLE_PROGRESSIONS``: Maps style names to their chord progressions
- ``DEFAULT_PROGRESSIONS``: Used for styles with no progression entry
- ``ALL_GROOVES``: The groove catalog the generator draws from

Drum pattern tokens: ``bu`` (kick), ``ca`` (snare), ``ch`` (closed hat),
``bch`` (kick + hat), ``cch`` (snare + hat), ``co`` (ride), ``to1``/``to2``
(toms), ``su`` (floor tom), ``at`` (crash) and ``-`` (rest).

Bass rhythm tokens: ``bo`` plays the next bass note, ``x`` is a muted ghost
note, ``-`` and ``sm`` hold the previous note.
"""

import dataclasses
import typing


CHROMATIC = "chromatic"

DEFAULT_BASS_SCALE: typing.Tuple[int, ...] = (1, 3, 5, 8)

DEFAULT_BEATS_PER_BAR = 4


STYLE_PROGRESSIONS: typing.Dict[str, typing.Tuple[typing.Tuple[int, ...], ...]] = {
	"Rock": ((1, 4, 5, 1), (1, 5, 6, 4), (6, 4, 1, 5)),
	"Rock2": ((4, 5, 1, 5), (5, 4, 1, 4)),
	"Blues": ((1, 4, 5, 4, 1, 4, 5, 4),),
	"Forro": ((1, 5, 1, 5, 4, 5, 4, 5),),
	"Samba": ((2, 5, 1, 1), (1, 4, 5, 1)),
	"Metal": ((1, 3, 5, 6), (1, 3, 4, 5)),
	"Jazz": ((1, 2, 5, 1), (2, 5, 1, 4)),
}

DEFAULT_PROGRESSIONS: typing.Tuple[typing.Tuple[int, ...], ...] = ((1, 4, 5, 1),)


@dataclasses.dataclass(frozen=True)
class Groove:

	"""
	A named rhythmic template for bass and drums in one style.

	Parameters:
		name: Display name, returned to the player as ``grooveName``.
		style: Key into ``STYLE_PROGRESSIONS`` and the tempo adjustments.
		meter: Time signature written as ``"N/4"``.
		drum_pattern: One or more token strings, joined with spaces.
		bass_rhythm: One or more token strings, joined with spaces.
		bass_scale: Major scale degrees (1-8) the bass cycles through,
			or ``"chromatic"`` for eight semitone steps up from the chord root.

	Example::

		groove = Groove(
			name="Shuffle",
			style="Blues",
			meter="4/4",
			drum_pattern=("bch - ch ch cch - ch ch",),
			bass_rhythm=("bo - bo -",),
			bass_scale=(1, 3, 5, 6),
		)
	"""

	name: str
	style: str
	meter: str
	drum_pattern: typing.Tuple[str, ...]
	bass_rhythm: typing.Tuple[str, ...]
	bass_scale: typing.Union[typing.Tuple[int, ...], str] = DEFAULT_BASS_SCALE

	def __post_init__ (self) -> None:
		if not any(p.split() for p in self.drum_pattern):
			raise ValueError(f"Groove {self.name!r}: drum_pattern must contain tokens")
		if not any(p.split() for p in self.bass_rhythm):
			raise ValueError(f"Groove {self.name!r}: bass_rhythm must contain tokens")
		if "/" not in self.meter:
			raise ValueError(f"Groove {self.name!r}: meter must look like 'N/4', got {self.meter!r}")

	@property
	def is_chromatic (self) -> bool:

		"""True when the bass walks chromatically instead of through scale degrees."""

		return self.bass_scale == CHROMATIC

	@property
	def beats_per_bar (self) -> int:

		"""Numerator of the meter."""

		return meter_to_beats(self.meter)


ALL_GROOVES: typing.Tuple[Groove, ...] = (
	Groove(
		name="Rock",
		style="Rock",
		meter="4/4",
		drum_pattern=("bch - ch - cch - ch - bch - ch - cch - ch -",),
		bass_rhythm=("bo - bo - bo - bo - bo - bo - bo -",),
		bass_scale=(1, 3, 5, 8),
	),
	Groove(
		name="Rock2",
		style="Rock2",
		meter="4/4",
		drum_pattern=("bch - ch - cch - ch - bch - ch - cch - ch -",),
		bass_rhythm=("bo - bo - bo - bo - bo - bo - bo -",),
		bass_scale=(1, 1, 1, 5),
	),
	Groove(
		name="Blues",
		style="Blues",
		meter="4/4",
		drum_pattern=("bch - ch ch cch - ch ch bch - ch ch cch - ch ch",),
		bass_rhythm=("bo - bo - bo - bo - bo - bo - bo - bo - bo -",),
		bass_scale=(1, 3, 5, 6, 8, 6, 5, 3),
	),
	Groove(
		name="Forro",
		style="Forro",
		meter="2/4",
		drum_pattern=("bch - co - ch - ca -",),
		bass_rhythm=("bo - - - x - - -",),
		bass_scale=(8, 1),
	),
	Groove(
		name="Samba",
		style="Samba",
		meter="2/4",
		drum_pattern=("bch - ch bu bch - ch bu",),
		bass_rhythm=("bo - x x bo - - x",),
		bass_scale=(8, 5),
	),
	Groove(
		name="Metal",
		style="Metal",
		meter="4/4",
		drum_pattern=("bch bu bch bu cch bu bch bu bch bu bch bu cch bu bch bu",),
		bass_rhythm=("bo bo bo bo bo bo bo bo bo bo bo bo bo bo bo bo",),
		bass_scale=(1, 3, 5, 8),
	),
	Groove(
		name="Jazz",
		style="Jazz",
		meter="4/4",
		drum_pattern=("bch co co - co co co ca bch co co - bch co co cch",),
		bass_rhythm=("bo - bo - bo - bo - bo - bo - bo - bo - bo - bo - bo - bo -",),
		bass_scale=CHROMATIC,
	),
)


def groove_names () -> typing.List[str]:

	"""Return the names of every groove in the catalog, in catalog order."""

	return [groove.name for groove in ALL_GROOVES]


def get_groove (name: str) -> Groove:

	"""
	Look up a groove by name.

	Raises:
		KeyError: If no groove in the catalog has that name.
	"""

	for groove in ALL_GROOVES:
		if groove.name == name:
			return groove

	raise KeyError(f"Unknown groove '{name}'. Available: {groove_names()}")


def progressions_for_style (style: str) -> typing.Tuple[typing.Tuple[int, ...], ...]:

	"""Return the chord progressions of a style, or the I-IV-V-I default for unknown styles."""

	return STYLE_PROGRESSIONS.get(style) or DEFAULT_PROGRESSIONS


def meter_to_beats (meter: typing.Optional[str]) -> int:

	"""
	Return the number of beats in a bar from a meter string.

	``"4/4"`` gives 4, ``"7/4"`` gives 7. Anything without a leading integer
	numerator gives 4.

	Example:
		```python
		meter_to_beats("2/4")   # → 2
		meter_to_beats("fast")  # → 4
		meter_to_beats(None)    # → 4
		```
	"""

	if not meter:
		return DEFAULT_BEATS_PER_BAR

	numerator = str(meter).split("/")[0].strip()

	try:
		return int(numerator)
	except ValueError:
		return DEFAULT_BEATS_PER_BAR
