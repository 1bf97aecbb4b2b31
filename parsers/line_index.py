"""
Read-only index over the text lines of one document.

Every lookup returns None instead of raising when a label or line is
missing. Indices are 0-based.
"""

import re
from collections.abc import Sequence
from typing import Callable, Iterator, Optional, Pattern, Union

from exceptions import InvalidLineSequenceError

LinePredicate = Callable[[str, int], bool]


class LineIndex:
    """
    Immutable view over a line sequence.

    Usage:
        index = LineIndex(lines)
        tour_li = index.find_first_equal("Tournumber:")
        value = index.get_offset(tour_li, 2)
    """

    __slots__ = ("_lines",)

    def __init__(self, lines: Sequence[str]):
        if lines is None or isinstance(lines, (str, bytes)) or not isinstance(lines, Sequence):
            raise InvalidLineSequenceError(received_type=type(lines).__name__)

        for i, line in enumerate(lines):
            if not isinstance(line, str):
                raise InvalidLineSequenceError(received_type=type(line).__name__, index=i)

        self._lines = tuple(lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines

    def get(self, index: Optional[int]) -> Optional[str]:
        """Line at index, or None if index is None or out of range."""
        if index is None or index < 0 or index >= len(self._lines):
            return None
        return self._lines[index]

    def get_offset(self, anchor: Optional[int], offset: int) -> Optional[str]:
        """Line at a fixed distance from an anchor, or None."""
        if anchor is None:
            return None
        return self.get(anchor + offset)

    def find_first(self, predicate: LinePredicate) -> Optional[int]:
        """First index where predicate(line, index) holds."""
        for i, line in enumerate(self._lines):
            if predicate(line, i):
                return i
        return None

    def find_first_equal(self, label: str) -> Optional[int]:
        """First index of a line exactly equal to label."""
        return self.find_first(lambda line, _: line == label)

    def find_first_startswith(self, prefix: str) -> Optional[int]:
        """First index of a line starting with prefix."""
        return self.find_first(lambda line, _: line.startswith(prefix))

    def find_first_matching(
        self,
        pattern: Union[str, Pattern[str]],
        window: Optional[Callable[[int], bool]] = None,
    ) -> Optional[int]:
        """
        First index whose line matches pattern (re.search).

        Args:
            pattern: Regex string or compiled pattern
            window: Optional index predicate limiting where to look

        Returns:
            Line index or None
        """
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self.find_first(
            lambda line, i: (window is None or window(i)) and compiled.search(line) is not None
        )

    def slice(self, start: int, length: int) -> list[str]:
        """Up to length lines from start; shorter when the end is reached."""
        if length <= 0 or start >= len(self._lines):
            return []
        return list(self._lines[max(start, 0):start + length])

    def between(self, start_label: str, end_label: str) -> list[str]:
        """
        Lines strictly between two labels.

        Empty when either label is missing or end does not come after start.
        """
        start = self.find_first_equal(start_label)
        end = self.find_first_equal(end_label)
        if start is None or end is None or end <= start:
            return []
        return self.slice(start + 1, end - start - 1)
