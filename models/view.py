from collections.abc import Sequence
from typing import Iterable

from models.angular_segment import AngularSegment


class View(Sequence):
    """
    Result of one painter's query: angular segments in back-to-front
    order. Built once, never mutated; overlapping intervals are kept as
    emitted, the emission order decides what ends up in front.
    """

    __slots__ = ("_segments",)

    def __init__(self, angular_segments: Iterable[AngularSegment] = ()):
        segments = tuple(angular_segments)
        if any(seg is None for seg in segments):
            raise ValueError("AngularSegment cannot be None.")
        self._segments = segments

    @classmethod
    def from_iterable(cls, angular_segments: Iterable[AngularSegment]) -> "View":
        return cls(angular_segments)

    def __getitem__(self, index):
        return self._segments[index]

    def __len__(self):
        return len(self._segments)

    @property
    def angular_segments(self):
        return self._segments

    def source_segments(self):
        """The projected fragments, in emission order."""
        return [seg.segment for seg in self._segments]

    def __repr__(self):
        return f"View360({list(self._segments)})"
