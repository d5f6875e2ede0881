"""Verification of generated corpora."""

from .scanner import CorpusReport, is_valid_line, scan_lines, scan_stream

__all__ = ["CorpusReport", "is_valid_line", "scan_lines", "scan_stream"]
