from __future__ import annotations


class SequenceError(Exception):
    """Base class for recoverable errors raised while collecting frames."""


class NotSequenceFile(SequenceError, ValueError):
    """The file name has no frame number under the configured split rule."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"not a sequence file: {filename!r}")
        self.filename = filename


class FrameExists(SequenceError, ValueError):
    """The frame was already added to the sequence."""

    def __init__(self, frame: int) -> None:
        super().__init__(f"frame exists: {frame}")
        self.frame = frame


class NegativeFrame(SequenceError, ValueError):
    """Frames are non-negative; raised when a split yields a negative one."""

    def __init__(self, frame: int) -> None:
        super().__init__(f"negative frame: {frame}")
        self.frame = frame
