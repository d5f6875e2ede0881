"""Corpus contract checker.

Downstream harnesses feed the generated corpus to the tool under test, so a
quick way to confirm that a file really is a well-formed corpus is useful.
:func:`scan_lines` walks the lines once and reports statistics together with
any line that is not a token of lowercase ASCII letters of at least the minimum
length.  When a budget is given the total length may exceed it by at most
``min_line_length - 1`` characters, matching the overshoot the generator
permits when it raises a clamped final line to the minimum length.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

from corpusgen.utils.errors import BudgetExceededError, CorpusFormatError

__all__ = [
    "CorpusReport",
    "is_valid_line",
    "scan_lines",
    "scan_stream",
]

_LETTERS = re.compile(r"[a-z]*")


@dataclass(frozen=True, slots=True)
class CorpusReport:
    """Structured result of a corpus scan."""

    line_count: int
    total_length: int
    min_length: int | None
    max_length: int | None
    invalid_count: int
    invalid_lines: list[int] = field(default_factory=list)
    budget: int | None = None
    min_line_length: int = 2

    @property
    def max_overshoot(self) -> int:
        """Characters the final line may add past the budget."""
        return max(self.min_line_length - 1, 0)

    @property
    def within_budget(self) -> bool:
        if self.budget is None:
            return True
        return self.total_length <= self.budget + self.max_overshoot

    @property
    def ok(self) -> bool:
        return self.invalid_count == 0 and self.within_budget

    def summary(self) -> str:
        parts = [
            f"lines={self.line_count}",
            f"chars={self.total_length}",
            f"min={self.min_length if self.min_length is not None else '-'}",
            f"max={self.max_length if self.max_length is not None else '-'}",
            f"invalid={self.invalid_count}",
        ]
        if self.budget is not None:
            parts.append(f"budget={self.budget}")
        return " ".join(parts)


def is_valid_line(line: str, min_line_length: int = 2) -> bool:
    """Return ``True`` when ``line`` is ``[a-z]{min_line_length,}``."""

    return len(line) >= min_line_length and _LETTERS.fullmatch(line) is not None


def scan_lines(
    lines: Iterable[str],
    *,
    budget: int | None = None,
    min_line_length: int = 2,
    max_reported: int = 20,
    strict: bool = False,
) -> CorpusReport:
    """Scan ``lines`` (newlines already removed) and build a report.

    With ``strict=True`` the first malformed line raises
    :class:`CorpusFormatError` and an over-budget total raises
    :class:`BudgetExceededError`.
    """

    line_count = 0
    total = 0
    shortest: int | None = None
    longest: int | None = None
    invalid_count = 0
    invalid_lines: list[int] = []

    for line_no, line in enumerate(lines, start=1):
        n = len(line)
        line_count += 1
        total += n
        shortest = n if shortest is None else min(shortest, n)
        longest = n if longest is None else max(longest, n)
        if not is_valid_line(line, min_line_length):
            if strict:
                raise CorpusFormatError(line_no, line)
            invalid_count += 1
            if len(invalid_lines) < max_reported:
                invalid_lines.append(line_no)

    report = CorpusReport(
        line_count=line_count,
        total_length=total,
        min_length=shortest,
        max_length=longest,
        invalid_count=invalid_count,
        invalid_lines=invalid_lines,
        budget=budget,
        min_line_length=min_line_length,
    )
    if strict and not report.within_budget:
        raise BudgetExceededError(f"Corpus holds {total} characters, budget is {budget}")
    return report


def scan_stream(
    stream: TextIO,
    *,
    budget: int | None = None,
    min_line_length: int = 2,
    max_reported: int = 20,
    strict: bool = False,
) -> CorpusReport:
    """Scan a text stream line by line; see :func:`scan_lines`."""

    return scan_lines(
        (raw.rstrip("\n") for raw in stream),
        budget=budget,
        min_line_length=min_line_length,
        max_reported=max_reported,
        strict=strict,
    )
