#!/usr/bin/env python3
"""
Ear Drill
=========
A terminal ear-training drill that:
  1. Plays every note of the chosen scale once
  2. Plays a random note from the scale
  3. Asks you which note it was (semitones above C, e.g. 0, 4, 7, 12)
  4. Quizzes the notes you miss more often

Dependencies: numpy, sounddevice
Usage:        python ear_drill.py [--scale major] [--speed 0.25]
"""

import logging
import random
import sys

import sounddevice as sd

from cli import CANCEL, init_logging, parse_args, print_scoreboard, print_welcome
from drill import RED, RST, Drill
from pacing import Pace
from prompts import input_try
from scales import build_scale_set
from tones import SAMPLE_RATE, generate_tone

logger = logging.getLogger("ear_drill")


# ─── Audio ───────────────────────────────────────────────────────────────────

def play_note(note: int, duration: float):
    """Play *note* and block until it has finished."""
    sd.play(generate_tone(note, duration), SAMPLE_RATE)
    sd.wait()


def read_guess():
    return input_try(int, "Guess the note.", "> ", CANCEL)


# ─── Main ────────────────────────────────────────────────────────────────────

def main(argv=None):
    args = parse_args(argv)
    init_logging(args.log_level)

    notes = build_scale_set(args.scale)
    logger.info("Scale mask %s → notes %s", format(args.scale, "012b"), notes)

    drill = Drill(
        notes,
        play_note=play_note,
        read_guess=read_guess,
        rng=random.Random(args.seed),
        pace=Pace(normal_speed=args.speed),
    )

    print_welcome(notes)

    try:
        drill.run(args.rounds)

    except (KeyboardInterrupt, EOFError):
        pass

    except sd.PortAudioError as e:
        print(f"\n  {RED}❌ Audio error: {e}{RST}")
        print(f"  Make sure your speakers or headphones are connected.")
        sys.exit(1)

    print_scoreboard(drill)


if __name__ == "__main__":
    main()
