"""
Drill Session
=============
One ear-training session: pick a note, play it, take guesses until the
user gets it, record the outcome, repeat.

Audio and keyboard are injected so the loop runs the same against the
real sound card or a test double:

    play_note(note, duration)   blocks until the note has finished
    read_guess()                returns an int, or None when the user cancels
"""

import logging
import time

from pacing import Pace
from scales import note_name
from selector import AdaptiveSelector
from tones import CORRECT_JINGLE, WRONG_JINGLE

logger = logging.getLogger(__name__)

# ─── Terminal Colors ─────────────────────────────────────────────────────────
RST = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"

SEPARATOR = "-" * 32


class Drill:
    """Runs quiz rounds over a fixed scale set."""

    def __init__(self, notes, play_note, read_guess, rng=None, pace=None,
                 sleep=time.sleep, out=print):
        self.selector = AdaptiveSelector(notes, rng=rng)
        self.pace = pace if pace is not None else Pace()
        self._play_note = play_note
        self._read_guess = read_guess
        self._sleep = sleep
        self._out = out
        self.rounds_played = 0
        self.attempts = 0

    @property
    def notes(self) -> tuple[int, ...]:
        return self.selector.notes

    def play(self, note: int, duration: float):
        self._play_note(note, duration)

    def play_scale(self):
        """Demonstrate every note of the scale, in order, at the current speed."""
        self._out(" ".join(str(note) for note in self.notes))
        for note in self.notes:
            self.play(note, self.pace.speed)

    def _play_jingle(self, jingle):
        speeds = {"fast": self.pace.fast_speed, "normal": self.pace.normal_speed}
        for note, tier in jingle:
            self.play(note, speeds[tier])

    def stats_line(self) -> str:
        parts = []
        for note, stat in zip(self.notes, self.selector.stats):
            parts.append(f"{note_name(note)} {stat.wins}/{stat.total}")
        return "  ".join(parts)

    def play_round(self) -> bool:
        """Quiz one note until it is guessed. Returns True once it is."""
        pace = self.pace
        index, note = self.selector.select()

        self._out(f"{DIM}Stats: {self.stats_line()}{RST}")
        self._out(f"Score: {CYAN}{self.selector.score}{RST}")
        self._out("Choosing note...")
        self._sleep(pace.slow_speed)
        self.play(note, pace.speed)

        while True:
            guess = self._read_guess()
            if guess is None:
                # Cancelled: hear it again, slowly
                self.play(note, pace.slow_speed)
                continue

            self.attempts += 1
            self._out(f"You played: {guess}")
            self._sleep(pace.fast_speed)
            self.play(guess, pace.speed)
            self._sleep(pace.fast_speed)
            self._out("Correct was:")
            self._sleep(pace.fast_speed)
            self.play(note, pace.speed)
            self._sleep(pace.fast_speed)

            if guess == note:
                self.selector.record_win(index)
                pace.on_win()
                self._out(f"{GREEN}Correct!{RST} Streak: {pace.streak.value}")
                self._play_jingle(CORRECT_JINGLE)
                self._sleep(pace.normal_speed)
                self._out("")
                self._out(SEPARATOR)
                self.rounds_played += 1
                return True

            self.selector.record_loss(index)
            replay_scale = pace.on_loss()
            self._out(f"{RED}Incorrect :P{RST} Streak: {pace.streak.value}")
            self._play_jingle(WRONG_JINGLE)
            self._sleep(pace.normal_speed)
            if replay_scale:
                logger.debug("Streak %d, demonstrating scale at %.3fs/note",
                             pace.streak.value, pace.speed)
                self.play_scale()
            self._out("")

    def run(self, rounds: int | None = None):
        """Demonstrate the scale, then play *rounds* rounds (forever if None)."""
        self.play_scale()
        while rounds is None or self.rounds_played < rounds:
            self.play_round()
