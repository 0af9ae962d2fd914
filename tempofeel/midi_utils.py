import logging
import typing

import mido

import tempofeel.constants
import tempofeel.phrase


logger = logging.getLogger(__name__)


def phrase_to_track (phrase: tempofeel.phrase.Phrase, ticks_per_beat: int = tempofeel.constants.MIDI_TICKS_PER_BEAT, name: typing.Optional[str] = None) -> mido.MidiTrack:

	"""
	Convert a phrase to a ``mido.MidiTrack`` with delta-time messages.

	Note-offs sort before note-ons on the same tick so a repeated pitch is
	released before it is struck again.
	"""

	events: typing.List[typing.Tuple[int, int, mido.Message]] = []

	for note in phrase:
		for tick, message in note.to_midi_messages(phrase.channel, ticks_per_beat):
			order = 0 if message.type == 'note_off' else 1
			events.append((tick, order, message))

	events.sort(key=lambda e: (e[0], e[1]))

	track = mido.MidiTrack()

	if name is not None:
		track.append(mido.MetaMessage('track_name', name=name, time=0))

	last_tick = 0

	for tick, _, message in events:
		track.append(message.copy(time=tick - last_tick))
		last_tick = tick

	track.append(mido.MetaMessage('end_of_track', time=0))

	return track


def phrases_to_midi_file (phrases: typing.Sequence[tempofeel.phrase.Phrase], tempo: float, ticks_per_beat: int = tempofeel.constants.MIDI_TICKS_PER_BEAT) -> mido.MidiFile:

	"""
	Build a type 1 MIDI file: a tempo track followed by one track per phrase.
	"""

	if tempo <= 0:
		raise ValueError(f"Tempo must be positive, got {tempo}")

	mid = mido.MidiFile(type=1)
	mid.ticks_per_beat = ticks_per_beat

	tempo_track = mido.MidiTrack()
	tempo_track.append(mido.MetaMessage('set_tempo', tempo=mido.bpm2tempo(tempo), time=0))
	tempo_track.append(mido.MetaMessage('end_of_track', time=0))
	mid.tracks.append(tempo_track)

	for i, phrase in enumerate(phrases):
		kind = "drums" if phrase.is_drums else "melodic"
		mid.tracks.append(phrase_to_track(phrase, ticks_per_beat, name=f"{kind} {i + 1}"))

	return mid


def save_phrases (phrases: typing.Sequence[tempofeel.phrase.Phrase], tempo: float, filename: str) -> None:

	"""
	Write phrases to a Standard MIDI File.
	"""

	mid = phrases_to_midi_file(phrases, tempo)

	logger.info(f"Saving {len(phrases)} phrase(s) at {tempo} BPM to {filename}...")

	mid.save(filename)

	logger.info(f"Saved {filename}")
