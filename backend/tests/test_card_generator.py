"""Tests for card generator."""
from backend.roaster.card_generator import MAX_ROAST_LINES, _verdict, _wrap_roast, generate_card

PNG_MAGIC = b'\x89PNG\r\n\x1a\n'


def test_verdict():
    assert _verdict(50) == "APPROVED"
    assert _verdict(49) == "REJECTED"


def test_wrap_roast_truncates_long_text():
    lines = _wrap_roast("Believe me, this is the worst idea. " * 40)
    assert len(lines) == MAX_ROAST_LINES
    assert lines[-1].endswith("...")


def test_wrap_roast_keeps_short_text():
    assert _wrap_roast("SAD!") == ["SAD!"]


def test_generate_card():
    png = generate_card("This idea is a TOTAL DISASTER. Believe me, folks!", 85)
    assert isinstance(png, bytes)
    assert len(png) > 1000
    assert png[:8] == PNG_MAGIC


def test_generate_card_executive_order():
    png = generate_card("Nobody roasts better than me.", 30, is_executive_order=True)
    assert png[:8] == PNG_MAGIC
