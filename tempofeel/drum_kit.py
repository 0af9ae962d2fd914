"""Drum-voice classification.

A :class:`DrumKeyMap` answers one question for the drums adapter: which part
of the kit does this pitch belong to? Kits differ between devices, so the map
is supplied by the caller; :meth:`DrumKeyMap.gm` builds the General MIDI one.
"""

import enum
import typing


class DrumSubset (enum.Enum):

	"""
	Groups of drum voices that share a timing and accent treatment.
	"""

	BASS = "bass"
	SNARE = "snare"
	HI_HAT = "hi_hat"
	TOM = "tom"
	CRASH = "crash"
	CYMBAL = "cymbal"			# Ride family
	PERCUSSION = "percussion"


class DrumKeyMap:

	"""
	Read-only mapping from MIDI pitch to drum subset.
	"""

	def __init__ (self, subsets: typing.Mapping[int, DrumSubset], name: str = "custom") -> None:

		"""
		Build a key map from a pitch to subset mapping.

		Parameters:
			subsets: Pitch (0-127) to :class:`DrumSubset`. Pitches not listed
				are unclassified.
			name: Label used in logs and ``repr``.
		"""

		for pitch, subset in subsets.items():
			if not 0 <= pitch <= 127:
				raise ValueError(f"Drum pitch {pitch} outside MIDI range 0-127")
			if not isinstance(subset, DrumSubset):
				raise ValueError(f"Pitch {pitch} mapped to {subset!r}, expected a DrumSubset")

		self.name = name
		self._subsets: typing.Dict[int, DrumSubset] = dict(subsets)


	@staticmethod
	def gm () -> "DrumKeyMap":

		"""
		Create the General MIDI Level 1 key map.
		"""

		import tempofeel.constants.gm_drums

		return DrumKeyMap(tempofeel.constants.gm_drums.GM_DRUM_SUBSETS, name="gm")


	def get_subset (self, pitch: int) -> typing.Optional[DrumSubset]:

		"""
		Return the subset of ``pitch``, or ``None`` when it is unclassified.
		"""

		return self._subsets.get(pitch)


	def get_keys (self, subset: DrumSubset) -> typing.List[int]:

		"""
		Return the sorted pitches belonging to ``subset``.
		"""

		return sorted(pitch for pitch, s in self._subsets.items() if s is subset)


	def __contains__ (self, pitch: object) -> bool:

		return pitch in self._subsets


	def __repr__ (self) -> str:

		return f"DrumKeyMap(name={self.name!r}, keys={len(self._subsets)})"
