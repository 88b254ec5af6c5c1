"""
Adaptive Note Selection
=======================
Keeps a win/loss record per note and picks the next quiz note with
probability proportional to how badly that note is going:

    weight = 1.25 - wins / (wins + losses)

A note the user always gets right still keeps weight 0.25, so nothing is
ever dropped from the rotation.

``notes`` and ``stats`` are aligned by position: ``stats[i]`` belongs to
``notes[i]``.
"""

import logging
import math
import random
from dataclasses import dataclass
from itertools import accumulate

logger = logging.getLogger(__name__)

# ─── Weight Settings ─────────────────────────────────────────────────────────
BASE_WEIGHT = 1.25


class SelectionError(RuntimeError):
    """Raised when the selector is handed input no caller should produce."""


@dataclass
class Stat:
    wins: int = 0
    losses: int = 0

    def __post_init__(self):
        if self.wins < 0 or self.losses < 0:
            raise ValueError(f"Counts cannot be negative: {self.wins}/{self.losses}")

    @property
    def total(self) -> int:
        return self.wins + self.losses

    @property
    def rate(self) -> float:
        """Win fraction, 0.0 before the first attempt."""
        if self.total == 0:
            return 0.0
        return self.wins / self.total

    @property
    def weight(self) -> float:
        return BASE_WEIGHT - self.rate


def weights(stats) -> list[float]:
    """Selection weights for *stats*, same order."""
    return [stat.weight for stat in stats]


def choose_biased(rng, notes, note_weights) -> tuple[int, int]:
    """
    Roulette-wheel pick of ``(index, note)``.

    *rng* is anything with a ``random()`` method returning a float in
    [0, 1), e.g. ``random.Random``.
    """
    if not notes:
        raise SelectionError("Cannot choose from an empty scale")
    if len(notes) != len(note_weights):
        raise SelectionError(
            f"{len(notes)} notes but {len(note_weights)} weights"
        )
    for i, weight in enumerate(note_weights):
        if not (math.isfinite(weight) and weight > 0):
            raise SelectionError(f"Weight {weight!r} at index {i} is not positive")

    # The range is the last running total, so the draw and the walk agree
    cumulative = list(accumulate(note_weights))
    weight_range = cumulative[-1]
    num = rng.random() * weight_range

    for i, bound in enumerate(cumulative):
        if num < bound:
            return i, notes[i]

    raise SelectionError(
        f"Draw {num!r} fell outside cumulative weight {weight_range!r}"
    )


def select(notes, stats, rng) -> tuple[int, int]:
    """Pick the next note to quiz from *notes* given their *stats*."""
    return choose_biased(rng, notes, weights(stats))


def record_outcome(stats, index: int, correct: bool):
    """Count one win or loss for ``stats[index]``."""
    if not 0 <= index < len(stats):
        raise SelectionError(f"Note index {index} out of range 0..{len(stats) - 1}")
    if correct:
        stats[index].wins += 1
    else:
        stats[index].losses += 1


class AdaptiveSelector:
    """A scale set together with its per-note stats for one session."""

    def __init__(self, notes, rng=None):
        if not notes:
            raise SelectionError("A scale set needs at least one note")
        self._notes = tuple(notes)
        self._stats = [Stat() for _ in self._notes]
        self._rng = rng if rng is not None else random.Random()

    @property
    def notes(self) -> tuple[int, ...]:
        return self._notes

    @property
    def stats(self) -> list[Stat]:
        return self._stats

    @property
    def score(self) -> int:
        """Net score: every win counts +1, every loss -1."""
        return sum(stat.wins - stat.losses for stat in self._stats)

    def weights(self) -> list[float]:
        return weights(self._stats)

    def select(self) -> tuple[int, int]:
        note_weights = self.weights()
        index, note = choose_biased(self._rng, self._notes, note_weights)
        logger.debug("Selected index %d (note %d) from weights %s",
                     index, note, note_weights)
        return index, note

    def record_win(self, index: int):
        self.record_outcome(index, True)

    def record_loss(self, index: int):
        self.record_outcome(index, False)

    def record_outcome(self, index: int, correct: bool):
        record_outcome(self._stats, index, correct)
        stat = self._stats[index]
        logger.debug("Note %d %s → %d/%d", self._notes[index],
                     "won" if correct else "lost", stat.wins, stat.total)
