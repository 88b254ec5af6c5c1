"""Streak tracking and playback speed tiers for a drill session."""

from dataclasses import dataclass, field

# ─── Speed Settings (seconds per note) ───────────────────────────────────────
NORMAL_SPEED = 0.25

SLOW_DOWN_STREAK = -3       # this many misses in a row → slow playback
REPLAY_SCALE_STREAK = -1    # any miss → play the whole scale again


@dataclass
class Streak:
    """Positive = consecutive correct answers, negative = consecutive misses."""
    value: int = 0

    def win(self) -> int:
        self.value = max(self.value, 0) + 1
        return self.value

    def loss(self) -> int:
        self.value = min(self.value, 0) - 1
        return self.value


@dataclass
class Pace:
    normal_speed: float = NORMAL_SPEED
    streak: Streak = field(default_factory=Streak)
    speed: float | None = None

    def __post_init__(self):
        if self.speed is None:
            self.speed = self.normal_speed

    @property
    def slow_speed(self) -> float:
        return self.normal_speed * 2

    @property
    def fast_speed(self) -> float:
        return self.normal_speed / 2

    def on_win(self):
        self.streak.win()
        self.speed = self.normal_speed

    def on_loss(self) -> bool:
        """Register a miss; True means the scale should be demonstrated again."""
        streak = self.streak.loss()
        if streak <= SLOW_DOWN_STREAK:
            self.speed = self.slow_speed
        return streak <= REPLAY_SCALE_STREAK
