import random
import typing

import pytest

import tempofeel.note_event
import tempofeel.phrase
import tempofeel.swing_profile


class FixedGauss:

	"""Stand-in for ``random.Random`` that always draws the same Gaussian sample."""

	def __init__ (self, value: float) -> None:

		self.value = value
		self.calls = 0

	def gauss (self, mu: float, sigma: float) -> float:

		"""Return the fixed sample and count the draw."""

		self.calls += 1
		return self.value


def make_note (position: float, pitch: int = 41, velocity: int = 80, duration: float = 0.5, **kwargs: typing.Any) -> tempofeel.note_event.NoteEvent:

	"""Build a note with sensible defaults for tests."""

	return tempofeel.note_event.NoteEvent(pitch=pitch, velocity=velocity, position=position, duration=duration, **kwargs)


def make_phrase (*notes: tempofeel.note_event.NoteEvent, is_drums: bool = False) -> tempofeel.phrase.Phrase:

	"""Build a phrase on channel 0 (or 9 for drums) holding the given notes."""

	return tempofeel.phrase.Phrase(channel=9 if is_drums else 0, is_drums=is_drums, notes=notes)


def snapshot (phrase: tempofeel.phrase.Phrase) -> typing.List[typing.Tuple[int, int, float, float]]:

	"""Comparable (pitch, velocity, position, duration) tuples in phrase order."""

	return [(n.pitch, n.velocity, n.position, n.duration) for n in phrase]


@pytest.fixture
def reference_profile () -> tempofeel.swing_profile.SwingProfile:

	"""Default curves with the reference swing ratios and no jitter."""

	return tempofeel.swing_profile.SwingProfile.create(
		intensity = 1.0,
		swing_ratios = [2.3, 2.0, 1.8, 1.6],
		apply_humanization = False
	)


@pytest.fixture
def rng () -> random.Random:

	"""A seeded generator so humanized output is repeatable."""

	return random.Random(42)
