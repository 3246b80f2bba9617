"""Heuristic roast scorer on a 0-100 scale.

score = base
      + EMPHASIS_WEIGHT per distinct emphasis phrase   (max EMPHASIS_CAP)
      + CAPS_WEIGHT per ALL-CAPS run of 2+ letters      (max CAPS_CAP)
      + EXCLAMATION_WEIGHT per '!'                      (max EXCLAMATION_CAP)
      + len(text) // LENGTH_DIVISOR                     (max LENGTH_CAP)
clamped to [MIN_SCORE, MAX_SCORE]. Pure function of the text.
"""

import re

MIN_SCORE = 0
MAX_SCORE = 100
BASE_SCORE = 50

EMPHASIS_PHRASES = (
    "tremendous", "huge", "sad", "fake", "believe me", "disaster",
    "the best", "bigly", "loser", "very low energy", "nobody",
    "total failure", "fired",
)
EMPHASIS_WEIGHT = 5
EMPHASIS_CAP = 25

CAPS_RE = re.compile(r"[A-Z]{2,}")
CAPS_WEIGHT = 2
CAPS_CAP = 20

EXCLAMATION_WEIGHT = 2
EXCLAMATION_CAP = 10

LENGTH_DIVISOR = 50
LENGTH_CAP = 5


def _emphasis_bonus(lower: str) -> int:
    matched = sum(1 for phrase in EMPHASIS_PHRASES if phrase in lower)
    return min(EMPHASIS_CAP, matched * EMPHASIS_WEIGHT)


def _caps_bonus(text: str) -> int:
    return min(CAPS_CAP, len(CAPS_RE.findall(text)) * CAPS_WEIGHT)


def _exclamation_bonus(text: str) -> int:
    return min(EXCLAMATION_CAP, text.count("!") * EXCLAMATION_WEIGHT)


def _length_bonus(text: str) -> int:
    return min(LENGTH_CAP, len(text) // LENGTH_DIVISOR)


def score_breakdown(text: str) -> dict:
    """Return each adjustment separately, plus the clamped total."""
    parts = {
        "base": BASE_SCORE,
        "emphasis": _emphasis_bonus(text.lower()),
        "caps": _caps_bonus(text),
        "exclamation": _exclamation_bonus(text),
        "length": _length_bonus(text),
    }
    parts["total"] = max(MIN_SCORE, min(MAX_SCORE, sum(parts.values())))
    return parts


def score(text: str) -> int:
    return score_breakdown(text)["total"]
