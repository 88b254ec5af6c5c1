import random

from drill import Drill
from scales import build_scale_set


class FakePlayer:
    def __init__(self):
        self.played = []

    def __call__(self, note, duration):
        self.played.append((note, duration))


def _guesses(*values):
    it = iter(values)
    return lambda: next(it)


class FirstSlot:
    def random(self):
        return 0.0


def _drill(notes, guesses, rng=None):
    player = FakePlayer()
    out = []
    drill = Drill(notes, play_note=player, read_guess=_guesses(*guesses),
                  rng=rng if rng is not None else FirstSlot(),
                  sleep=lambda s: None, out=out.append)
    return drill, player, out


def test_round_with_cancel_miss_and_hit():
    drill, player, out = _drill((0, 12), [None, 5, 0])

    assert drill.play_round() is True

    assert player.played == [
        (0, 0.25),                   # quiz note
        (0, 0.5),                    # cancelled: replay slowly
        (5, 0.25), (0, 0.25),        # guess, then the answer
        (3, 0.125), (2, 0.125),      # wrong jingle
        (0, 0.25), (12, 0.25),       # scale demonstrated again
        (0, 0.25), (0, 0.25),        # guess, then the answer
        (0, 0.125), (4, 0.125), (12, 0.25),  # correct jingle
    ]
    stat = drill.selector.stats[0]
    assert (stat.wins, stat.losses) == (1, 1)
    assert drill.selector.stats[1].total == 0
    assert drill.pace.streak.value == 1
    assert drill.attempts == 2
    assert drill.rounds_played == 1
    assert any("Correct was:" in line for line in out)


def test_three_misses_slow_playback_until_a_hit():
    drill, player, _out = _drill((0, 12), [1, 2, 3, 0])

    drill.play_round()

    # After the third miss the scale is replayed at slow speed
    assert (0, 0.5) in player.played and (12, 0.5) in player.played
    assert drill.selector.stats[0].losses == 3
    assert drill.pace.speed == 0.25


def test_run_demonstrates_scale_then_plays_rounds():
    notes = build_scale_set(0)
    drill, player, _out = _drill(notes, [12, 12, 12], rng=random.Random(0))

    drill.run(rounds=2)

    assert player.played[0] == (12, 0.25)
    assert drill.rounds_played == 2
    assert drill.selector.stats[0].wins == 2
    assert drill.selector.score == 2


def test_stats_line_lists_every_note():
    drill, _player, _out = _drill(build_scale_set(0b100010010000), [])
    drill.selector.record_win(1)
    assert drill.stats_line() == "C 0/0  E 1/1  G 0/0  C' 0/0"
