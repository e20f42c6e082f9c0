from __future__ import annotations

from collections.abc import Iterator

from seqls.errors import FrameExists, NegativeFrame


class FrameRange:
    """
    A contiguous, closed range of frames [min, max].

    A range starts as a single frame and only ever grows upwards one frame
    at a time through extend().
    """

    __slots__ = ("min", "max")

    def __init__(self, frame: int) -> None:
        self.min = frame
        self.max = frame

    def extend(self, frame: int) -> bool:
        """Extend the range by one if frame == max + 1. Return True if extended."""
        if frame != self.max + 1:
            return False
        self.max = frame
        return True

    def __len__(self) -> int:
        return self.max - self.min + 1

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.min, self.max + 1))

    def __contains__(self, frame: object) -> bool:
        return isinstance(frame, int) and self.min <= frame <= self.max

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrameRange):
            return NotImplemented
        return (self.min, self.max) == (other.min, other.max)

    # extend() mutates the range, so it must not be used as a set member or key
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FrameRange({self.min}-{self.max})"

    def __str__(self) -> str:
        if self.min == self.max:
            return f"{self.min}"
        return f"{self.min}-{self.max}"


class FrameSequence:
    """
    An unordered set of frame numbers belonging to one sequence.

    The sequence does not know its own name; SequenceManager keys it.
    Frames can be added but never removed.
    """

    def __init__(self) -> None:
        self._frames: set[int] = set()

    def add_frame(self, frame: int) -> None:
        """
        Add a frame.

        Raises NegativeFrame for frame < 0 and FrameExists when the frame is
        already present. The sequence is left untouched on failure.
        """
        if frame < 0:
            raise NegativeFrame(frame)
        if frame in self._frames:
            raise FrameExists(frame)
        self._frames.add(frame)

    def frames(self) -> list[int]:
        """Return all frames in ascending order."""
        return sorted(self._frames)

    def ranges(self) -> list[FrameRange]:
        """Compress the frames into maximal contiguous ranges, ascending."""
        frames = self.frames()
        if not frames:
            return []

        rng = FrameRange(frames[0])
        rngs = [rng]
        for f in frames[1:]:
            if not rng.extend(f):
                rng = FrameRange(f)
                rngs.append(rng)
        return rngs

    def missing_frames(self) -> list[int]:
        """Return the holes between the first and last frame, ascending."""
        missing: list[int] = []
        rngs = self.ranges()
        for prev, nxt in zip(rngs, rngs[1:]):
            missing.extend(range(prev.max + 1, nxt.min))
        return missing

    @property
    def first(self) -> int | None:
        return min(self._frames) if self._frames else None

    @property
    def last(self) -> int | None:
        return max(self._frames) if self._frames else None

    def __len__(self) -> int:
        return len(self._frames)

    def __contains__(self, frame: object) -> bool:
        return frame in self._frames

    def __repr__(self) -> str:
        return f"FrameSequence({self})"

    def __str__(self) -> str:
        return " ".join(str(r) for r in self.ranges())
