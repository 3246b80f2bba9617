"""Tests for roast engine."""
import asyncio
import random
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from backend.roaster.errors import ValidationError
from backend.roaster.extractor import extract
from backend.roaster.models import Category
from backend.roaster.roast_engine import _build_prompt, generate_roast, validate_submission

IDEA = "A dog-walking app for busy professionals in the city"


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")


def _mock_client(mock_cls, response=None, side_effect=None):
    mock_client = AsyncMock()
    mock_client.messages.create = AsyncMock(return_value=response, side_effect=side_effect)
    mock_cls.return_value = mock_client
    return mock_client


def _response(text):
    response = MagicMock()
    response.content = [MagicMock(text=text)]
    return response


@pytest.mark.parametrize("category,content,message", [
    (None, "anything", "Missing required fields"),
    ("idea", "   ", "Missing required fields"),
    ("poem", "roses are red", "Invalid type"),
    ("idea", "hi", "too short"),
    ("idea", "x" * 1001, "too long"),
    ("resume", "too brief", "too short"),
    ("resume", "x" * 5001, "Content too long"),
    ("twitter", "@bad handle!", "valid Twitter handle"),
    ("twitter", "@" + "a" * 51, "valid Twitter handle"),
])
def test_validate_submission_rejects(category, content, message):
    with pytest.raises(ValidationError, match=message):
        validate_submission(category, content)


def test_validate_submission_normalizes():
    assert validate_submission("idea", f"  {IDEA}  ") == (Category.IDEA, IDEA)
    assert validate_submission("twitter", "Twitter handle: @donald") == (Category.TWITTER, "donald")


def test_build_prompt_idea():
    prompt = _build_prompt(extract("idea", IDEA))
    assert "Roast this idea" in prompt
    assert IDEA in prompt
    assert "technology" in prompt
    assert "a service" in prompt
    assert "never say who the customers are" in prompt
    assert prompt.endswith("Roast:")


def test_build_prompt_resume():
    bundle = extract("resume", "Education: State University. Skills: leadership, excel. Experience: at Acme Corp.")
    prompt = _build_prompt(bundle)
    assert "Employer mentioned: Acme Corp" in prompt
    assert "School mentioned: State University" in prompt
    assert "Skills listed: leadership, excel" in prompt


def test_build_prompt_twitter():
    prompt = _build_prompt(extract("twitter", "xX_coder123_Xx"))
    assert "@xX_coder123_Xx" in prompt
    assert "numbers" in prompt
    assert "underscores" in prompt


@pytest.mark.asyncio
async def test_generate_roast_llm(api_key):
    with patch("backend.roaster.roast_engine.anthropic.AsyncAnthropic") as mock_cls:
        client = _mock_client(mock_cls, _response("  This idea is a TOTAL DISASTER, believe me!  "))
        result = await generate_roast("idea", IDEA, random.Random(1))

    assert result.source == "llm"
    assert result.text == "This idea is a TOTAL DISASTER, believe me!"
    assert 0 <= result.score <= 100
    kwargs = client.messages.create.call_args.kwargs
    assert kwargs["max_tokens"] == 500
    assert IDEA in kwargs["messages"][0]["content"]


@pytest.mark.asyncio
async def test_generate_roast_without_key_uses_template(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    with patch("backend.roaster.roast_engine.anthropic.AsyncAnthropic") as mock_cls:
        result = await generate_roast("twitter", "xX_coder123_Xx")
        mock_cls.assert_not_called()
    assert result.source == "template"
    assert "@xX_coder123_Xx" in result.text


@pytest.mark.asyncio
@pytest.mark.parametrize("side_effect", [RuntimeError("boom"), asyncio.TimeoutError()])
async def test_generate_roast_falls_back_on_llm_errors(api_key, side_effect):
    with patch("backend.roaster.roast_engine.anthropic.AsyncAnthropic") as mock_cls:
        _mock_client(mock_cls, side_effect=side_effect)
        result = await generate_roast("idea", IDEA)
    assert result.source == "template"
    assert result.text


@pytest.mark.asyncio
async def test_generate_roast_falls_back_on_empty_text(api_key):
    with patch("backend.roaster.roast_engine.anthropic.AsyncAnthropic") as mock_cls:
        _mock_client(mock_cls, _response("   "))
        result = await generate_roast("resume", "Education: State University. Experience: at Acme Corp.")
    assert result.source == "template"
    assert "Acme Corp" in result.text


@pytest.mark.asyncio
async def test_generate_roast_template_is_reproducible(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    a = await generate_roast("idea", IDEA, random.Random(7))
    b = await generate_roast("idea", IDEA, random.Random(7))
    assert a == b
