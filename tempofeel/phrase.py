import logging
import typing

import tempofeel.beat_range
import tempofeel.event_emitter
import tempofeel.note_event


logger = logging.getLogger(__name__)


NOTES_ADDED = "notes_added"
NOTES_REMOVED = "notes_removed"
NOTES_REPLACED = "notes_replaced"
NOTES_REPLACED_ADJUSTING = "notes_replaced_adjusting"


def _position_key (note: tempofeel.note_event.NoteEvent) -> float:
	return note.position


class Phrase:

	"""
	An ordered collection of notes played on one MIDI channel.

	Notes are kept sorted by position (insertion order breaks ties). Every
	mutation builds a complete new note list before swapping it in, so a
	reader iterating a phrase always sees either the old or the new state,
	never a mix. Listeners are told about a change once it has been applied.

	Example::

		phrase = Phrase(channel=9, is_drums=True)
		phrase.add(NoteEvent(pitch=51, velocity=80, position=0.0, duration=0.25))

		phrase.on("notes_replaced", lambda mapping: print(len(mapping), "notes moved"))
	"""

	def __init__ (self, channel: int, is_drums: bool = False, notes: typing.Iterable[tempofeel.note_event.NoteEvent] = ()) -> None:

		"""
		Create a phrase on ``channel`` (0-15), optionally prefilled with notes.
		"""

		if not 0 <= channel <= 15:
			raise ValueError(f"MIDI channel must be between 0 and 15, got {channel}")

		self.channel = channel
		self.is_drums = is_drums

		self._notes: typing.List[tempofeel.note_event.NoteEvent] = sorted(notes, key=_position_key)
		self._events = tempofeel.event_emitter.EventEmitter()


	# ── Queries ──────────────────────────────────────────────────────

	@property
	def notes (self) -> typing.List[tempofeel.note_event.NoteEvent]:

		"""A snapshot of the notes in position order."""

		return list(self._notes)

	def __iter__ (self) -> typing.Iterator[tempofeel.note_event.NoteEvent]:
		return iter(list(self._notes))

	def __len__ (self) -> int:
		return len(self._notes)

	def __contains__ (self, note: object) -> bool:
		return any(n is note for n in self._notes)

	def is_empty (self) -> bool:
		return not self._notes

	def higher (self, note: tempofeel.note_event.NoteEvent) -> typing.Optional[tempofeel.note_event.NoteEvent]:

		"""
		Return the note that follows ``note`` in the phrase, or ``None``.
		"""

		notes = self._notes
		for i, n in enumerate(notes):
			if n is note:
				return notes[i + 1] if i + 1 < len(notes) else None

		raise ValueError(f"{note!r} does not belong to this phrase")

	@property
	def beat_range (self) -> typing.Optional[tempofeel.beat_range.BeatRange]:

		"""
		The smallest range covering every note, or ``None`` for an empty phrase.
		"""

		if not self._notes:
			return None

		start = self._notes[0].position
		end = max(n.end for n in self._notes)
		return tempofeel.beat_range.BeatRange(start=start, end=end)


	# ── Mutations ────────────────────────────────────────────────────

	def add (self, note: tempofeel.note_event.NoteEvent) -> None:

		self._notes = sorted([*self._notes, note], key=_position_key)
		self._events.emit(NOTES_ADDED, [note])


	def remove (self, note: tempofeel.note_event.NoteEvent) -> None:

		if note not in self:
			raise ValueError(f"{note!r} does not belong to this phrase")

		self._notes = [n for n in self._notes if n is not note]
		self._events.emit(NOTES_REMOVED, [note])


	def replace (self, old: tempofeel.note_event.NoteEvent, new: tempofeel.note_event.NoteEvent, is_adjusting: bool = False) -> None:

		if old is new:
			return

		self.replace_all({old: new}, is_adjusting=is_adjusting)


	def replace_all (self, mapping: typing.Mapping[tempofeel.note_event.NoteEvent, tempofeel.note_event.NoteEvent], is_adjusting: bool = False) -> None:

		"""
		Substitute several notes in one step.

		Every key must belong to the phrase; otherwise nothing changes and
		``ValueError`` is raised. Listeners receive a single
		``notes_replaced`` event (``notes_replaced_adjusting`` while an edit
		is still in progress) carrying the mapping.

		Parameters:
			mapping: Old note to new note.
			is_adjusting: Marks the change as an intermediate step.
		"""

		if not mapping:
			return

		current = self._notes
		ids = {id(n) for n in current}
		missing = [old for old in mapping if id(old) not in ids]
		if missing:
			raise ValueError(f"{len(missing)} note(s) to replace do not belong to this phrase, first: {missing[0]!r}")

		by_id = {id(old): new for old, new in mapping.items()}
		self._notes = sorted((by_id.get(id(n), n) for n in current), key=_position_key)

		logger.debug("Replaced %d note(s) on channel %d", len(mapping), self.channel)

		self._events.emit(NOTES_REPLACED_ADJUSTING if is_adjusting else NOTES_REPLACED, dict(mapping))


	# ── Listeners ────────────────────────────────────────────────────

	def on (self, event_name: str, callback: tempofeel.event_emitter.CallbackType) -> None:
		self._events.on(event_name, callback)

	def off (self, event_name: str, callback: tempofeel.event_emitter.CallbackType) -> None:
		self._events.off(event_name, callback)


	def __repr__ (self) -> str:

		kind = "drums" if self.is_drums else "melodic"
		return f"Phrase(channel={self.channel}, {kind}, notes={len(self._notes)})"
