"""
Command-line options, logging setup and the printed screens of the drill.

Kept apart from ``ear_drill`` so nothing here needs an audio device.
"""

import argparse
import logging

from drill import BOLD, CYAN, DIM, GREEN, RED, RST, YELLOW
from pacing import NORMAL_SPEED
from scales import DEFAULT_SCALE, note_name, parse_scale_mask

CANCEL = "?"


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Adaptive ear-training drill.")
    ap.add_argument("--scale", type=parse_scale_mask, default=DEFAULT_SCALE,
                    help="preset name (major, minor, pentatonic, blues, chromatic) "
                         "or 12-bit mask, degree 0 first (default: major)")
    ap.add_argument("--speed", type=float, default=NORMAL_SPEED,
                    help="seconds per note at normal speed (default: %(default)s)")
    ap.add_argument("--rounds", type=int, default=None,
                    help="stop after this many notes are found (default: endless)")
    ap.add_argument("--seed", type=int, default=None,
                    help="seed the note picker for a repeatable session")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    if args.speed <= 0:
        ap.error("--speed must be positive")
    if args.rounds is not None and args.rounds < 1:
        ap.error("--rounds must be at least 1")
    return args


def init_logging(level: str):
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


# ─── Screens ─────────────────────────────────────────────────────────────────

def print_welcome(notes):
    print()
    print(f"  {BOLD}🎵  Ear Drill{RST}")
    print(f"  {DIM}{'━' * 50}{RST}")
    print()
    print(f"  Notes: {CYAN}{' '.join(note_name(n) for n in notes)}{RST}"
          f"  ({' '.join(str(n) for n in notes)})")
    print(f"  Type the number of the note you hear.")
    print(f"  Type {YELLOW}{CANCEL}{RST} to hear it again, Ctrl+C to exit.")
    print()


def print_scoreboard(drill):
    """Print the final score summary."""
    stats = drill.selector.stats
    wins = sum(stat.wins for stat in stats)
    total = sum(stat.total for stat in stats)

    print("\n\n")
    print(f"  {BOLD}📊  Final Score{RST}")
    print(f"  {DIM}{'━' * 30}{RST}")
    if total > 0:
        pct = wins / total * 100
        print(f"  Correct: {GREEN}{wins}{RST} / {total}  ({pct:.0f}%)")
        print(f"  Notes found: {drill.rounds_played}  │  Net score: {CYAN}{drill.selector.score}{RST}")
        print()
        for note, stat in zip(drill.notes, stats):
            if stat.total == 0:
                print(f"    {note_name(note):>4s} ({note:>2d})  {DIM}not asked{RST}")
                continue
            colour = GREEN if stat.rate >= 0.7 else YELLOW if stat.rate >= 0.5 else RED
            print(f"    {note_name(note):>4s} ({note:>2d})  "
                  f"{colour}{stat.wins}/{stat.total}{RST}  ({stat.rate * 100:.0f}%)")
        print()
        if pct >= 90:
            print(f"  {GREEN}🌟 Excellent!{RST}")
        elif pct >= 70:
            print(f"  {YELLOW}👍 Good job!{RST}")
        elif pct >= 50:
            print(f"  {YELLOW}💪 Keep practicing!{RST}")
        else:
            print(f"  {RED}🎯 More practice needed – keep at it!{RST}")
    else:
        print(f"  No notes attempted.")
    print()
    print(f"  👋  Happy practicing! 🎵")
    print()
