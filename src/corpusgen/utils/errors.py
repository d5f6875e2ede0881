"""Typed exceptions for configuration and corpus validation."""


class CorpusError(ValueError):
    """Base class for corpus related errors."""


class CorpusFormatError(CorpusError):
    """Raised when a corpus line does not match the output contract."""

    def __init__(self, line_no: int, line: str) -> None:
        preview = line if len(line) <= 40 else line[:37] + "..."
        super().__init__(f"Line {line_no} is not a valid corpus token: {preview!r}")
        self.line_no = line_no
        self.line = line


class BudgetExceededError(CorpusError):
    """Raised when a corpus holds more characters than its budget allows."""
