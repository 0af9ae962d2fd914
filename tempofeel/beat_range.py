import dataclasses

import tempofeel.note_event


@dataclasses.dataclass(frozen=True)
class BeatRange:

	"""
	A half-open interval of beat positions, ``[start, end)``.
	"""

	start: float
	end: float

	def __post_init__ (self) -> None:
		if self.start < 0:
			raise ValueError(f"start cannot be negative, got {self.start}")
		if self.end < self.start:
			raise ValueError(f"end ({self.end}) must not precede start ({self.start})")

	@property
	def size (self) -> float:
		return self.end - self.start

	def contains (self, position: float) -> bool:

		"""True when ``position`` lies in ``[start, end)``."""

		return self.start <= position < self.end

	def contains_note (self, note: tempofeel.note_event.NoteEvent) -> bool:

		"""
		True when the note starts inside the range.

		The note may extend past ``end``; adapters shorten such notes when
		they clamp to the range.
		"""

		return self.contains(note.position)
