"""Random bass and drum playback generation.

``generate_random_playback()`` picks a groove, a chord progression and a key
at random, then derives a fixed-length step sequence for the bass and for
each of the nine drum lanes. The result is a ``PlaybackDescriptor`` whose
``to_dict()`` form is what the animation player consumes::

	{
		"bpm": 100,
		"grooveName": "Rock",
		"bassSeq": ["28G", "x", "32B", "x", ...],
		"bateriaSeq": {"bumbo": ["bumbo", "x", ...], "caixa": [...], ...},
	}

Only the first chord of the chosen progression is used, so every playback
is a short loop over a single harmony.

Generation never raises: missing or invalid arguments and incomplete table
entries fall back to defaults.
"""

import dataclasses
import logging
import random
import typing

import jamon.constants
import jamon.constants.pitches
import jamon.drums
import jamon.groove
import jamon.mini_notation
import jamon.samples


logger = logging.getLogger(__name__)

T = typing.TypeVar("T")

GHOST_TOKEN = "x"

CHROMATIC_POOL_SIZE = 8

# Style -> (BPM change, lowest resulting BPM).
STYLE_TEMPO_ADJUSTMENTS: typing.Dict[str, typing.Tuple[int, int]] = {
	"Samba": (-10, 70),
	"Jazz": (-10, 70),
	"Metal": (20, 110),
}


@typing.runtime_checkable
class UniformSource (typing.Protocol):

	"""
	Protocol for the random source used by the generator.

	``random.Random`` satisfies it. Tests can pass any object that replays
	chosen values.
	"""

	def random (self) -> float:

		"""
		Return the next float in [0, 1).
		"""

		...


@dataclasses.dataclass
class PlaybackDescriptor:

	"""
	One generated bass and drum loop.

	The first four fields are the player's contract; ``to_dict()`` returns
	exactly those. The rest describe how the loop was made.

	Parameters:
		bpm: Tempo after the style adjustment.
		groove_name: Name of the groove that was picked.
		bass_seq: One value per step - a sample code, or ``"x"`` for no new note.
		bateria_seq: Drum voice name -> one value per step (the voice name or ``"x"``).
		style: Style of the groove.
		meter: Meter string of the groove.
		beats_per_bar: Numerator of the meter.
		steps_per_bar: Sixteenth-note steps in one bar of the meter.
		key: Pitch class name of the key.
		degree: Degree of the chord the bass is built on.
		progression: The progression the degree was taken from.
		bass_notes: The sample codes the bass cycles through.
	"""

	bpm: typing.Union[int, float]
	groove_name: str
	bass_seq: typing.List[str]
	bateria_seq: typing.Dict[str, typing.List[str]]
	style: str = ""
	meter: str = ""
	beats_per_bar: int = jamon.groove.DEFAULT_BEATS_PER_BAR
	steps_per_bar: int = jamon.constants.DEFAULT_STEP_COUNT
	key: str = ""
	degree: int = 1
	progression: typing.Tuple[int, ...] = ()
	bass_notes: typing.List[str] = dataclasses.field(default_factory=list)

	@property
	def step_count (self) -> int:

		"""Length shared by the bass sequence and every drum lane."""

		return len(self.bass_seq)

	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Return the descriptor in the shape the player reads."""

		return {
			"bpm": self.bpm,
			"grooveName": self.groove_name,
			"bassSeq": list(self.bass_seq),
			"bateriaSeq": {voice: list(lane) for voice, lane in self.bateria_seq.items()},
		}


def _choose (options: typing.Sequence[T], rng: UniformSource) -> T:

	"""Pick one option uniformly using a single draw from ``rng``."""

	index = int(rng.random() * len(options))
	return options[min(index, len(options) - 1)]


def _is_positive_number (value: typing.Any) -> bool:
	return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def resolve_step_count (step_count: typing.Any) -> int:

	"""Return ``step_count`` if it is a positive integer, else the default of 16."""

	if isinstance(step_count, int) and not isinstance(step_count, bool) and step_count > 0:
		return step_count

	return jamon.constants.DEFAULT_STEP_COUNT


def adjust_bpm (bpm_base: typing.Any, style: str) -> typing.Union[int, float]:

	"""
	Return the playback tempo for a style.

	Missing or non-positive ``bpm_base`` becomes 100. Samba and Jazz play 10
	BPM slower but never below 70; Metal plays 20 BPM faster and never below
	110. Other styles keep the base tempo.

	Example:
		```python
		adjust_bpm(100, "Jazz")   # → 90
		adjust_bpm(75, "Samba")   # → 70
		adjust_bpm(80, "Metal")   # → 110
		adjust_bpm(0, "Rock")     # → 100
		```
	"""

	bpm = bpm_base if _is_positive_number(bpm_base) else jamon.constants.DEFAULT_BPM

	if style in STYLE_TEMPO_ADJUSTMENTS:
		change, floor = STYLE_TEMPO_ADJUSTMENTS[style]
		bpm = max(floor, bpm + change)

	return bpm


def _bass_degrees (groove: jamon.groove.Groove) -> typing.Sequence[int]:

	"""Return the groove's bass degrees, or the default arpeggio if they are unusable."""

	scale = groove.bass_scale

	if isinstance(scale, (list, tuple)) and scale:
		return scale

	return jamon.groove.DEFAULT_BASS_SCALE


def bass_pitch_classes (groove: jamon.groove.Groove, root_index: int) -> typing.List[int]:

	"""
	Return the pitch class indices the bass cycles through, in order.

	Chromatic grooves climb eight semitones from the chord root. Other
	grooves map each bass degree through the major scale above the root;
	the octave (degree 8) folds back onto the root's pitch class.

	Parameters:
		groove: The groove whose ``bass_scale`` is used.
		root_index: Index of the chord root in ``PITCH_CLASSES``.
	"""

	if groove.is_chromatic:
		return [(root_index + i) % 12 for i in range(CHROMATIC_POOL_SIZE)]

	offsets = jamon.constants.pitches.MAJOR_SCALE_OFFSETS

	return [(root_index + (offsets.get(degree, 0) % 12)) % 12 for degree in _bass_degrees(groove)]


def bass_note_pool (groove: jamon.groove.Groove, root_index: int) -> typing.List[str]:

	"""Return the sample codes the bass cycles through for a groove and chord root."""

	pitch_classes = jamon.constants.pitches.PITCH_CLASSES

	return [
		jamon.samples.pick_sample_for_pitch_class(pitch_classes[index])
		for index in bass_pitch_classes(groove, root_index)
	]


def build_bass_sequence (rhythm: typing.Sequence[str], notes: typing.Sequence[str]) -> typing.List[str]:

	"""
	Fill a bass rhythm with notes.

	``"x"`` (muted ghost note) and ``"-"``/``"sm"`` (hold) all produce ``"x"``.
	Any other token plays the next note of ``notes``, wrapping around when
	the pool runs out. The pool only advances on played steps.

	Example:
		```python
		build_bass_sequence(["bo", "-", "bo", "x", "bo"], ["25E", "28G"])
		# → ["25E", "x", "28G", "x", "25E"]
		```
	"""

	sequence: typing.List[str] = []
	cursor = 0

	for token in rhythm:

		if token == GHOST_TOKEN or token in jamon.constants.SUSTAIN_TOKENS or not notes:
			sequence.append(jamon.constants.REST_MARKER)

		else:
			sequence.append(notes[cursor % len(notes)])
			cursor += 1

	return sequence


def generate_random_playback (
	step_count: typing.Optional[int] = jamon.constants.DEFAULT_STEP_COUNT,
	bpm_base: typing.Optional[typing.Union[int, float]] = jamon.constants.DEFAULT_BPM,
	rng: typing.Optional[UniformSource] = None,
	seed: typing.Optional[int] = None,
) -> PlaybackDescriptor:

	"""
	Generate a random bass and drum loop.

	Draws, in order, a groove from ``ALL_GROOVES``, a progression of the
	groove's style, and a key. The bass is built on the first chord of the
	progression.

	Parameters:
		step_count: Number of steps in every sequence. Non-positive or
			missing values use 16.
		bpm_base: Tempo before the style adjustment. Non-positive or
			missing values use 100.
		rng: Random source with a ``random()`` method. Defaults to a new
			``random.Random(seed)``.
		seed: Seed for the default random source. Ignored when ``rng``
			is given.

	Example:
		```python
		playback = generate_random_playback(32, 120, seed=7)
		player.load(playback.to_dict())
		```
	"""

	if rng is None:
		rng = random.Random(seed)

	total_steps = resolve_step_count(step_count)

	groove = _choose(jamon.groove.ALL_GROOVES, rng)
	style = groove.style or groove.name

	bpm = adjust_bpm(bpm_base, style)

	beats = groove.beats_per_bar
	steps_per_bar = beats * 4 or jamon.constants.DEFAULT_STEP_COUNT

	progression = _choose(jamon.groove.progressions_for_style(style), rng)
	degree = progression[0] if progression else 1

	pitch_classes = jamon.constants.pitches.PITCH_CLASSES
	key_index = _choose(range(len(pitch_classes)), rng)
	root_index = (key_index + jamon.constants.pitches.DEGREE_TO_ROOT.get(degree, 0)) % 12

	logger.debug(f"Groove {groove.name} in {pitch_classes[key_index]} on degree {degree} at {bpm} BPM")

	bass_notes = bass_note_pool(groove, root_index)
	bass_rhythm = jamon.mini_notation.expand_rhythm(groove.bass_rhythm, total_steps)
	bass_seq = build_bass_sequence(bass_rhythm, bass_notes)

	drum_tokens = jamon.mini_notation.expand_rhythm(groove.drum_pattern, total_steps)
	bateria_seq = jamon.drums.build_drum_lanes(drum_tokens)

	return PlaybackDescriptor(
		bpm=bpm,
		groove_name=groove.name,
		bass_seq=bass_seq,
		bateria_seq=bateria_seq,
		style=style,
		meter=groove.meter,
		beats_per_bar=beats,
		steps_per_bar=steps_per_bar,
		key=pitch_classes[key_index],
		degree=degree,
		progression=tuple(progression),
		bass_notes=bass_notes,
	)
