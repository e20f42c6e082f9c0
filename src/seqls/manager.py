from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from seqls.errors import NotSequenceFile, SequenceError
from seqls.formatters import Formatter, fmt_sharp
from seqls.frames import FrameSequence
from seqls.splitter import DEFAULT_SPLITTER, Splitter


class SequenceManager:
    """
    Collect file names into named frame sequences.

    Each added name is split into (prefix, digits, suffix); the formatter
    turns those parts into the sequence name and the digits become the frame
    number. Sequences are created on first use and never removed.

    Usage:

        man = SequenceManager(DEFAULT_SPLITTER, fmt_sharp)
        for name in names:
            man.add(name)
        print(man)
    """

    def __init__(
        self,
        splitter: Splitter = DEFAULT_SPLITTER,
        formatter: Formatter = fmt_sharp,
    ) -> None:
        self._splitter = splitter
        self._formatter = formatter
        self._seqs: dict[str, FrameSequence] = {}

    @property
    def splitter(self) -> Splitter:
        return self._splitter

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    @property
    def sequences(self) -> Mapping[str, FrameSequence]:
        """Read-only view of sequence name -> FrameSequence."""
        return MappingProxyType(self._seqs)

    def add(self, filename: str) -> None:
        """
        Add a file to the manager, creating its sequence if needed.

        Raises NotSequenceFile, FrameExists or NegativeFrame. A rejected name
        leaves the manager unchanged.
        """
        prefix, digits, suffix = self._splitter.split(filename)
        name = self._formatter(prefix, digits, suffix)
        try:
            frame = int(digits)
        except ValueError:
            # digits too long for int(), or not digits at all from a custom rule
            raise NotSequenceFile(filename) from None

        seq = self._seqs.get(name)
        if seq is None:
            seq = FrameSequence()
            seq.add_frame(frame)
            self._seqs[name] = seq
        else:
            seq.add_frame(frame)

    def add_all(self, filenames: Iterable[str]) -> list[tuple[str, SequenceError]]:
        """
        Add every name, skipping the ones that are rejected.

        Returns the rejected names paired with their errors, in input order.
        """
        rejected: list[tuple[str, SequenceError]] = []
        for fname in filenames:
            try:
                self.add(fname)
            except SequenceError as e:
                rejected.append((fname, e))
        return rejected

    def sequence_names(self) -> list[str]:
        """Return the sequence names in ascending order."""
        return sorted(self._seqs)

    def sequence_lines(self) -> list[str]:
        """Return one "<name> <ranges>" line per sequence."""
        return [f"{name} {self._seqs[name]}" for name in self.sequence_names()]

    def range_lines(self) -> list[str]:
        """Return one "<name> <range>" line per contiguous range."""
        return [
            f"{name} {rng}"
            for name in self.sequence_names()
            for rng in self._seqs[name].ranges()
        ]

    def __getitem__(self, name: str) -> FrameSequence:
        return self._seqs[name]

    def __contains__(self, name: object) -> bool:
        return name in self._seqs

    def __len__(self) -> int:
        return len(self._seqs)

    def __iter__(self) -> Iterator[str]:
        return iter(self.sequence_names())

    def __repr__(self) -> str:
        return f"SequenceManager({len(self._seqs)} sequences)"

    def __str__(self) -> str:
        return "\n".join(self.sequence_lines())
