"""Tests for the template roast generator."""
import random

import pytest

from backend.roaster import phrases
from backend.roaster.extractor import extract
from backend.roaster.generator import generate

SAMPLES = {
    "idea": [
        "A dog-walking app for busy professionals in the city",
        "A bakery selling fresh bread to tourists",
        "An AI platform that helps banks " + "really " * 40 + "understand their customers",
    ],
    "resume": [
        "Education: State University. Skills: leadership, excel. Experience: at Acme Corp.",
        "Just a person who likes cats and long walks on the beach.",
        "Skills:\nPython, Rust, Negotiation\n\nWorked for Initech as a synergy guru",
    ],
    "twitter": ["xX_coder123_Xx", "bob", "averyveryverylonghandle", "donald", "@ELONMUSK"],
}


def _roast(category, text, seed=None):
    rng = random.Random(seed) if seed is not None else None
    return generate(category, extract(category, text), rng)


def test_idea_scenario_mentions_app_and_tech():
    text = _roast("idea", "A dog-walking app for busy professionals in the city")
    assert phrases.IDEA_APP in text
    assert phrases.IDEA_TOPIC["has_tech"] in text
    assert phrases.IDEA_TOPIC["has_service"] in text
    assert text.startswith('So your idea is "A dog-walking app for busy professionals..."')


def test_idea_every_matched_topic_contributes():
    text = _roast("idea", "An app to sell crypto investment kits online")
    assert phrases.IDEA_TOPIC["has_tech"] in text
    assert phrases.IDEA_TOPIC["has_product"] in text
    assert phrases.IDEA_TOPIC["has_finance"] in text
    assert phrases.IDEA_TOPIC["has_service"] not in text


def test_idea_critiques_unset_flags():
    text = _roast("idea", "A bakery selling fresh bread to tourists")
    assert phrases.IDEA_CRITIQUE["has_market"] in text
    assert phrases.IDEA_CRITIQUE["has_innovation"] in text
    assert phrases.IDEA_CRITIQUE["is_detailed"] in text
    assert phrases.IDEA_NO_APP in text
    assert phrases.IDEA_LENGTH_SHORT in text


def test_idea_length_branches():
    medium = "A subscription box for houseplants. " * 3
    long = "A subscription box for houseplants. " * 7
    assert phrases.IDEA_LENGTH_MEDIUM in _roast("idea", medium.strip())
    assert phrases.IDEA_LENGTH_LONG in _roast("idea", long.strip())


def test_resume_scenario_echoes_entity():
    text = _roast("resume", SAMPLES["resume"][0])
    assert "Acme Corp" in text
    assert "State University" in text
    assert "leadership and excel" in text
    assert text.startswith(phrases.RESUME_OPENING)
    assert text.endswith(phrases.RESUME_CLOSING)


def test_resume_absent_branches():
    text = _roast("resume", SAMPLES["resume"][1])
    assert phrases.RESUME_EDUCATION_ABSENT in text
    assert phrases.RESUME_EXPERIENCE_ABSENT in text
    assert phrases.RESUME_SKILLS_ABSENT in text


def test_resume_buzzword_callout():
    text = _roast("resume", SAMPLES["resume"][2])
    assert '"synergy"' in text
    assert "Python and Rust" in text


def test_twitter_scenario_underscore_sentence():
    text = _roast("twitter", "xX_coder123_Xx")
    assert phrases.TWITTER_UNDERSCORES.format(handle="xX_coder123_Xx") in text
    assert phrases.TWITTER_COMPARE in text
    assert phrases.TWITTER_ENGAGEMENT in text


@pytest.mark.parametrize("handle,expected", [
    ("averyveryverylonghandle", phrases.TWITTER_TOO_LONG),
    ("bob", phrases.TWITTER_TOO_SHORT),
    ("donald", phrases.TWITTER_DEFAULT),
    ("a_very_very_long_handle", phrases.TWITTER_UNDERSCORES.format(handle="a_very_very_long_handle")),
])
def test_twitter_handle_shape_priority(handle, expected):
    assert expected in _roast("twitter", handle)


def test_seeded_rng_is_reproducible():
    for category, texts in SAMPLES.items():
        for text in texts:
            assert _roast(category, text, seed=42) == _roast(category, text, seed=42)


def test_random_picks_come_from_pools():
    text = _roast("twitter", "donald", seed=1)
    assert any(p in text for p in phrases.TWITTER_FOLLOWERS)
    assert any(p in text for p in phrases.TWITTER_CONTENT)
    assert any(p in text for p in phrases.TWITTER_CLOSINGS)


def test_generate_never_empty_across_many_trials():
    rng = random.Random(2024)
    for category, texts in SAMPLES.items():
        bundles = [extract(category, t) for t in texts]
        for i in range(1000):
            text = generate(category, bundles[i % len(bundles)], rng)
            assert text
            assert text == text.strip()
            assert "  " not in text
