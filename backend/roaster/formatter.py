"""Packages roast text and score into the final RoastResult."""

import random

from backend.roaster.models import RoastResult

EXECUTIVE_ORDER_PROBABILITY = 0.10
HIGH_SCORE_THRESHOLD = 70

# (minimum score, ROAST tokens awarded), highest band first
REWARD_TIERS = (
    (90, 100),
    (80, 75),
    (70, 50),
    (50, 25),
)
REWARD_FLOOR = 10

HIGH_SCORE_IMAGES = (
    "https://media.giphy.com/media/j6ZlX8ghxNFRknObVk/giphy.gif",
    "https://media.giphy.com/media/1ube10l4xArN6/giphy.gif",
    "https://media.giphy.com/media/ZBythhSiZAoYea7qwL/giphy.gif",
)
LOW_SCORE_IMAGES = (
    "https://media.giphy.com/media/xTiTnHXbRoaZ1B1Mo8/giphy.gif",
    "https://media.giphy.com/media/xTiTnvFvRnmYGl6CEE/giphy.gif",
)


def reward_tokens(score: int) -> int:
    """ROAST tokens earned for a score."""
    for minimum, amount in REWARD_TIERS:
        if score >= minimum:
            return amount
    return REWARD_FLOOR


def pick_image(score: int, rng: random.Random) -> str:
    pool = HIGH_SCORE_IMAGES if score >= HIGH_SCORE_THRESHOLD else LOW_SCORE_IMAGES
    return rng.choice(pool)


def format_result(text: str, score: int, rng: random.Random | None = None, source: str = "template") -> RoastResult:
    # The executive-order flag is an independent draw, not derived from score.
    rng = rng or random.Random()
    return RoastResult(
        text=text,
        score=score,
        is_executive_order=rng.random() < EXECUTIVE_ORDER_PROBABILITY,
        reward_tokens=reward_tokens(score),
        image_url=pick_image(score, rng),
        source=source,
    )
