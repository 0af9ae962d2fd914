"""Time signatures as seen by the tempo adapters.

The adapters only ask two things of a meter: how many natural beats a bar
holds, and whether a beat position is a primary pulse. Compound meters count
dotted-quarter beats, so 6/8 has two natural beats per bar.
"""

import dataclasses
import math
import typing

import tempofeel.constants.durations


COMPOUND_UPPERS = (6, 9, 12)


@dataclasses.dataclass(frozen=True)
class TimeSignature:

	"""
	A bar layout with a downbeat predicate.

	Parameters:
		upper: Beats per bar as written (the top number).
		lower: Note value of one written beat (4 or 8).
	"""

	upper: int
	lower: int

	def __post_init__ (self) -> None:

		if self.lower == 4:
			if not 1 <= self.upper <= 16:
				raise ValueError(f"Unsupported time signature {self.upper}/{self.lower}")

		elif self.lower == 8:
			if self.upper not in COMPOUND_UPPERS:
				raise ValueError(f"Unsupported time signature {self.upper}/{self.lower}: only 6/8, 9/8 and 12/8 are compound meters")

		else:
			raise ValueError(f"Unsupported time signature {self.upper}/{self.lower}")


	@property
	def beats_per_bar (self) -> int:

		"""Number of natural beats in one bar."""

		if self.lower == 8:
			return self.upper // 3

		return self.upper


	@property
	def strong_beats (self) -> typing.Tuple[int, ...]:

		"""
		Beat indexes (0-based) that carry a primary pulse.

		Beat 0 always does. Four-beat bars also pulse on beat 2, the "3" of
		"1 and 3".
		"""

		if self.beats_per_bar == 4:
			return (0, 2)

		return (0,)


	def beat_in_bar (self, position: float) -> float:

		"""Position within its bar, in beats."""

		return position % self.beats_per_bar


	def is_downbeat (self, beat_in_bar: float) -> bool:

		"""
		True when ``beat_in_bar`` lies within the grid tolerance of a strong beat.

		A position just before the bar line counts as the next bar's beat 0.
		"""

		nearest = math.floor(beat_in_bar + 0.5)

		if abs(beat_in_bar - nearest) > tempofeel.constants.durations.GRID_TOLERANCE:
			return False

		return (nearest % self.beats_per_bar) in self.strong_beats


	def __str__ (self) -> str:

		return f"{self.upper}/{self.lower}"


TWO_FOUR = TimeSignature(2, 4)
THREE_FOUR = TimeSignature(3, 4)
FOUR_FOUR = TimeSignature(4, 4)
FIVE_FOUR = TimeSignature(5, 4)
SIX_EIGHT = TimeSignature(6, 8)
TWELVE_EIGHT = TimeSignature(12, 8)
