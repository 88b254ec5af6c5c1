"""
Tone Synthesis
==============
Sine tones for the drill, rendered with numpy and handed to the audio
device as float32 buffers.

Note 0 is C4; note 9 is A4 = 440 Hz.
"""

import numpy as np

# ─── Audio Settings ──────────────────────────────────────────────────────────
SAMPLE_RATE = 44100
TONE_VOLUME = 0.1
FADE_OUT = 0.02             # seconds of linear fade at the end of each tone

# ─── Feedback Jingles (note, speed tier) ─────────────────────────────────────
CORRECT_JINGLE = ((0, "fast"), (4, "fast"), (12, "normal"))
WRONG_JINGLE = ((3, "fast"), (2, "fast"))


def note_freq(note: int) -> float:
    """Frequency in Hz of *note* semitones above C4."""
    return 440.0 * 2.0 ** ((note - 9) / 12.0)


def generate_tone(note: int, duration: float, volume: float = TONE_VOLUME,
                  sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Render *note* as a sine wave lasting *duration* seconds."""
    n_samples = max(1, int(sample_rate * duration))
    t = np.arange(n_samples) / sample_rate

    envelope = np.ones(n_samples)

    # Fade out so consecutive notes don't click
    fade = min(int(FADE_OUT * sample_rate), n_samples)
    if fade > 0:
        envelope[-fade:] *= np.linspace(1, 0, fade)

    signal = volume * np.sin(2 * np.pi * note_freq(note) * t) * envelope
    return signal.astype(np.float32)
