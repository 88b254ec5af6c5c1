"""
Scale Sets
==========
Turns a 12-bit scale mask into the ordered list of notes the drill quizzes.

A note is a plain ``int``: semitones above the reference C (note 0).
Bit 11 of the mask is scale degree 0, bit 0 is degree 11, so the mask reads
left to right like a keyboard:

    0b1010_1101_0101  →  C D E F G A B   (major)
"""

# ─── Scale Settings ──────────────────────────────────────────────────────────
OCTAVE_NOTE = 12                 # appended to every scale set
DEGREES = 12
FULL_MASK = (1 << DEGREES) - 1

PRESET_SCALES = {
    "major":      0b1010_1101_0101,
    "minor":      0b1011_0101_1010,
    "pentatonic": 0b1010_1001_0100,
    "blues":      0b1001_0111_0010,
    "chromatic":  0b1111_1111_1111,
}

DEFAULT_SCALE = PRESET_SCALES["major"]

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]


def from_scale(bits: int) -> list[int]:
    """Return the set scale degrees of *bits* in ascending order."""
    mask = 1 << (DEGREES - 1)
    degrees = []
    for degree in range(DEGREES):
        if bits & mask:
            degrees.append(degree)
        mask >>= 1
    return degrees


def build_scale_set(bits: int) -> tuple[int, ...]:
    """
    Build the playable notes for *bits*: its degrees plus the octave.

    The octave note is always 12, whatever the mask, so a zero mask still
    yields ``(12,)``.
    """
    return tuple(from_scale(bits)) + (OCTAVE_NOTE,)


def parse_scale_mask(text: str) -> int:
    """Parse a preset name, ``0b…``/``0x…`` literal, 12-digit binary or decimal."""
    raw = text.strip().lower().replace("_", "")
    if raw in PRESET_SCALES:
        return PRESET_SCALES[raw]

    if len(raw) == DEGREES and set(raw) <= {"0", "1"}:
        value = int(raw, 2)
    else:
        try:
            value = int(raw, 0)
        except ValueError:
            raise ValueError(f"Unknown scale: {text!r}") from None

    if not 0 <= value <= FULL_MASK:
        raise ValueError(f"Scale mask must fit in {DEGREES} bits: {text!r}")
    return value


def note_name(note: int) -> str:
    """'C', 'F#' … with ' per octave up and , per octave down (12 → C')."""
    octave, degree = divmod(note, DEGREES)
    marks = "'" * octave if octave > 0 else "," * -octave
    return NOTE_NAMES[degree] + marks
