"""Tests for the result formatter."""
import random

import pytest

from backend.roaster.formatter import (
    HIGH_SCORE_IMAGES,
    LOW_SCORE_IMAGES,
    format_result,
    pick_image,
    reward_tokens,
)


class StubRandom:
    """Deterministic stand-in for random.Random."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def choice(self, seq):
        return seq[0]


@pytest.mark.parametrize("score,tokens", [
    (100, 100), (90, 100), (89, 75), (80, 75), (79, 50),
    (70, 50), (69, 25), (50, 25), (49, 10), (0, 10),
])
def test_reward_tiers(score, tokens):
    assert reward_tokens(score) == tokens


def test_image_pool_follows_score():
    rng = random.Random(0)
    for _ in range(50):
        assert pick_image(70, rng) in HIGH_SCORE_IMAGES
        assert pick_image(69, rng) in LOW_SCORE_IMAGES


def test_executive_order_flag_from_rng():
    assert format_result("roast", 60, StubRandom(0.05)).is_executive_order
    assert not format_result("roast", 60, StubRandom(0.5)).is_executive_order
    assert not format_result("roast", 60, StubRandom(0.10)).is_executive_order


def test_flag_independent_of_score():
    assert format_result("roast", 0, StubRandom(0.0)).is_executive_order
    assert not format_result("roast", 100, StubRandom(0.99)).is_executive_order


def test_format_is_reproducible_with_seed():
    a = format_result("roast text", 75, random.Random(3))
    b = format_result("roast text", 75, random.Random(3))
    assert a == b
    assert a.text == "roast text"
    assert a.reward_tokens == 50
    assert a.image_url in HIGH_SCORE_IMAGES


def test_response_shape():
    result = format_result("roast text", 42, StubRandom(0.5), source="llm")
    assert result.to_response() == {
        "roast": "roast text",
        "score": 42,
        "isExecutiveOrder": False,
        "rewardTokens": 10,
        "imageUrl": LOW_SCORE_IMAGES[0],
        "source": "llm",
    }
