"""corpusgen: deterministic random-letter corpus generator for test fixtures."""

from .generator import CorpusGenerator, generate_text, run

__version__ = "0.1.0"

__all__ = ["CorpusGenerator", "generate_text", "run", "__version__"]
