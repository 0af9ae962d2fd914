import dataclasses
import enum
import types
import typing

import mido

import tempofeel.constants
import tempofeel.constants.velocity


class Accidental (enum.Enum):

	"""
	How a pitch should be spelled when displayed.
	"""

	SHARP = "sharp"
	FLAT = "flat"


@dataclasses.dataclass(frozen=True, eq=False)
class NoteEvent:

	"""
	A single note placed in time, measured in beats.

	Note events are immutable values: every transformation builds a new note
	with :meth:`set_all` (or one of the narrower setters). Equality and hashing
	are by identity so that two notes with the same fields stay distinct keys
	in a :meth:`tempofeel.phrase.Phrase.replace_all` mapping.

	Parameters:
		pitch: MIDI note number (0-127).
		velocity: Attack strength (1-127).
		position: Start position in beats from the phrase origin (>= 0).
		duration: Length in beats (> 0).
		accidental: Preferred spelling of the pitch.
		properties: Opaque client data carried into replacement notes.
	"""

	pitch: int
	velocity: int
	position: float
	duration: float
	accidental: Accidental = Accidental.SHARP
	properties: typing.Mapping[str, typing.Any] = dataclasses.field(default_factory=dict)

	def __post_init__ (self) -> None:

		if not 0 <= self.pitch <= 127:
			raise ValueError(f"pitch must be between 0 and 127, got {self.pitch}")

		if not tempofeel.constants.velocity.MIN_VELOCITY <= self.velocity <= tempofeel.constants.velocity.MAX_VELOCITY:
			raise ValueError(f"velocity must be between 1 and 127, got {self.velocity}")

		if self.position < 0:
			raise ValueError(f"position cannot be negative, got {self.position}")

		if self.duration <= 0:
			raise ValueError(f"duration must be positive, got {self.duration}")

		# Read-only view so carried properties cannot be mutated through a note
		object.__setattr__(self, "properties", types.MappingProxyType(dict(self.properties)))


	@property
	def end (self) -> float:

		"""Position in beats where the note stops sounding."""

		return self.position + self.duration


	def set_all (self, pitch: int, duration: float, velocity: int, position: float, accidental: typing.Optional[Accidental] = None, copy_properties: bool = True) -> "NoteEvent":

		"""
		Return a new note with every field replaced.

		Parameters:
			accidental: Defaults to this note's accidental.
			copy_properties: When false the new note starts with no properties.
		"""

		return NoteEvent(
			pitch = pitch,
			velocity = velocity,
			position = position,
			duration = duration,
			accidental = accidental if accidental is not None else self.accidental,
			properties = self.properties if copy_properties else {}
		)


	def set_position (self, position: float, copy_properties: bool = True) -> "NoteEvent":

		return self.set_all(self.pitch, self.duration, self.velocity, position, copy_properties=copy_properties)


	def set_velocity (self, velocity: int, copy_properties: bool = True) -> "NoteEvent":

		return self.set_all(self.pitch, self.duration, velocity, self.position, copy_properties=copy_properties)


	def set_duration (self, duration: float, copy_properties: bool = True) -> "NoteEvent":

		return self.set_all(self.pitch, duration, self.velocity, self.position, copy_properties=copy_properties)


	def to_midi_messages (self, channel: int, ticks_per_beat: int = tempofeel.constants.MIDI_TICKS_PER_BEAT) -> typing.List[typing.Tuple[int, mido.Message]]:

		"""
		Convert the note to a note-on/note-off pair with absolute tick times.

		The ``time`` attribute of each message is left at 0: absolute ticks are
		returned alongside so the caller can interleave notes and compute
		delta times once, as a ``mido.MidiTrack`` expects.
		"""

		if ticks_per_beat <= 0:
			raise ValueError("Ticks per beat must be positive")

		on_tick = int(round(self.position * ticks_per_beat))
		off_tick = max(on_tick + 1, int(round(self.end * ticks_per_beat)))

		return [
			(on_tick, mido.Message('note_on', channel=channel, note=self.pitch, velocity=self.velocity)),
			(off_tick, mido.Message('note_off', channel=channel, note=self.pitch, velocity=0)),
		]


	def __repr__ (self) -> str:

		return f"NoteEvent(pitch={self.pitch}, velocity={self.velocity}, position={self.position:.4f}, duration={self.duration:.4f})"
