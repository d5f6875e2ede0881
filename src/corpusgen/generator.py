"""Deterministic random-letter corpus generator.

The generator emits newline separated tokens of lowercase ASCII letters until a
character budget is used up.  Line lengths follow a geometric distribution
(number of failures before the first success), so most lines are short with an
occasional long one.  Each sampled length is clamped to the remaining budget
and then raised to the minimum line length, which means the final line may
overshoot the budget by at most one character.

All randomness comes from a single :class:`random.Random` seeded with the
configured integer seed.  The geometric sampler uses inversion on one uniform
draw and letters are drawn with :meth:`random.Random.choices`, so a seed and a
budget fully determine the output bytes.
"""

from __future__ import annotations

import math
import random
import string
from collections.abc import Iterator
from typing import TextIO

from .config import GeneratorSettings
from .utils.logging import get_logger

__all__ = [
    "ALPHABET",
    "DEFAULT_PROBABILITY",
    "DEFAULT_MIN_LINE_LENGTH",
    "CorpusGenerator",
    "sample_geometric",
    "random_line",
    "run",
    "generate_text",
]

ALPHABET: str = string.ascii_lowercase
DEFAULT_PROBABILITY: float = 0.01
DEFAULT_MIN_LINE_LENGTH: int = 2

log = get_logger(__name__)


def sample_geometric(rng: random.Random, probability: float) -> int:
    """Return the number of failures before the first success.

    ``probability`` must lie strictly between 0 and 1.
    """

    if not 0.0 < probability < 1.0:
        raise ValueError("probability must be in the open interval (0, 1)")
    # 1 - U lies in (0, 1], so the logarithm is always defined.
    u = 1.0 - rng.random()
    return math.floor(math.log(u) / math.log1p(-probability))


def random_line(rng: random.Random, length: int) -> str:
    """Return ``length`` letters drawn uniformly from :data:`ALPHABET`."""

    return "".join(rng.choices(ALPHABET, k=length))


class CorpusGenerator:
    """Emit a reproducible corpus for one set of generator settings."""

    def __init__(self, settings: GeneratorSettings) -> None:
        self.settings = settings
        self.rng = random.Random(settings.seed)
        self.lines_emitted = 0
        self.chars_emitted = 0

    def iter_lines(self) -> Iterator[str]:
        """Yield corpus lines (without newlines) until the budget is spent."""

        budget = self.settings.max_total_length
        min_len = self.settings.min_line_length
        while self.chars_emitted < budget:
            add_len = sample_geometric(self.rng, self.settings.probability)
            add_len = min(add_len, budget - self.chars_emitted)
            if add_len < min_len:
                add_len = min_len
            line = random_line(self.rng, add_len)
            self.chars_emitted += add_len
            self.lines_emitted += 1
            yield line

    def write(self, out: TextIO) -> int:
        """Write every line followed by ``"\\n"`` to ``out``.

        Returns the number of characters written, newlines excluded.  Errors
        raised by ``out`` propagate to the caller.
        """

        log.debug(
            "generating corpus: budget=%d seed=%d p=%g",
            self.settings.max_total_length,
            self.settings.seed,
            self.settings.probability,
        )
        for line in self.iter_lines():
            out.write(line)
            out.write("\n")
        log.info("generated %d lines, %d chars", self.lines_emitted, self.chars_emitted)
        return self.chars_emitted


def run(
    max_total_length: int,
    seed: int,
    out: TextIO,
    *,
    probability: float = DEFAULT_PROBABILITY,
    min_line_length: int = DEFAULT_MIN_LINE_LENGTH,
) -> int:
    """Generate a corpus of ``max_total_length`` characters into ``out``."""

    settings = GeneratorSettings(
        max_total_length=max_total_length,
        seed=seed,
        probability=probability,
        min_line_length=min_line_length,
    )
    return CorpusGenerator(settings).write(out)


def generate_text(
    max_total_length: int,
    seed: int,
    *,
    probability: float = DEFAULT_PROBABILITY,
    min_line_length: int = DEFAULT_MIN_LINE_LENGTH,
) -> str:
    """Return the corpus as a single string; meant for small budgets."""

    settings = GeneratorSettings(
        max_total_length=max_total_length,
        seed=seed,
        probability=probability,
        min_line_length=min_line_length,
    )
    return "".join(line + "\n" for line in CorpusGenerator(settings).iter_lines())
