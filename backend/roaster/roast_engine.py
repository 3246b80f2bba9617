"""Roast pipeline: LLM-powered roast with a template fallback, then scoring."""

import asyncio
import logging
import os
import random

import anthropic

from backend.roaster import scorer
from backend.roaster.errors import UpstreamGenerationFailure, ValidationError
from backend.roaster.extractor import extract, normalize_handle
from backend.roaster.formatter import format_result
from backend.roaster.generator import generate
from backend.roaster.models import Category, RoastResult, SignalBundle

logger = logging.getLogger(__name__)

MODEL = os.environ.get("ROAST_MODEL", "claude-3-5-haiku-20241022")
ROAST_TIMEOUT = float(os.environ.get("ROAST_TIMEOUT", "20"))

MAX_CONTENT_CHARS = 5000
MIN_CHARS = {Category.IDEA: 10, Category.RESUME: 30, Category.TWITTER: 1}
MAX_CHARS = {Category.IDEA: 1000, Category.RESUME: MAX_CONTENT_CHARS, Category.TWITTER: 50}
HANDLE_CHARS = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_")

SYSTEM_PROMPT = """You are the President of the United States doing a comedy roast. You speak in his distinctive style: superlatives, hyperbole, repetition, nicknames, and catchphrases like "believe me", "tremendous", "SAD!" and "nobody's ever seen anything like it".

KEY RULES:
- Use CAPITAL LETTERS for emphasis, the way he does
- Reference SPECIFIC details from the submission, never generic filler
- Compare everything to yourself, and always win the comparison
- Be funny, not cruel. No slurs, no attacks on protected traits
- 4-7 sentences, plain text only, no lists, no JSON, no stage directions"""

PROMPT_INTROS = {
    Category.IDEA: "Below is a business or product idea. Roast this idea.",
    Category.RESUME: "Below is a summary of someone's resume or qualifications. Roast this resume.",
    Category.TWITTER: "Below is a Twitter handle. Pretend you've looked at their account and roast them.",
}


def validate_submission(category: str | None, content: str | None) -> tuple[Category, str]:
    """Check a raw request. Returns the category and the cleaned content."""
    if not category or not content or not str(content).strip():
        raise ValidationError("Missing required fields: type and content")
    try:
        category = Category(category)
    except ValueError:
        raise ValidationError("Invalid type. Must be one of: idea, resume, twitter")

    text = str(content).strip()
    if len(text) > MAX_CONTENT_CHARS:
        raise ValidationError(f"Content too long. Keep it under {MAX_CONTENT_CHARS} characters.")

    if category is Category.TWITTER:
        handle = normalize_handle(text)
        if not handle or len(handle) > MAX_CHARS[category] or not set(handle) <= HANDLE_CHARS:
            raise ValidationError("Please enter a valid Twitter handle!")
        return category, handle

    if len(text) < MIN_CHARS[category]:
        raise ValidationError(
            f"Your {category.value} is too short. Give me at least {MIN_CHARS[category]} characters!"
        )
    if len(text) > MAX_CHARS[category]:
        raise ValidationError(
            f"Your {category.value} is too long. Keep it under {MAX_CHARS[category]} characters."
        )
    return category, text


def _build_prompt(bundle: SignalBundle) -> str:
    lines = [PROMPT_INTROS[bundle.category], ""]

    if bundle.category is Category.IDEA:
        lines.append(f"Idea: {bundle.raw_text}")
        topics = [name for name, flag in (
            ("technology", bundle.has_tech),
            ("a physical product", bundle.has_product),
            ("a service", bundle.has_service),
            ("a platform or social network", bundle.has_platform),
            ("money or finance", bundle.has_finance),
        ) if flag]
        if topics:
            lines.append(f"It involves: {', '.join(topics)}")
        if not bundle.has_market:
            lines.append("They never say who the customers are.")
        if not bundle.is_detailed:
            lines.append("Very few details were given.")
    elif bundle.category is Category.RESUME:
        lines.append(f"Resume: {bundle.raw_text}")
        if bundle.company:
            lines.append(f"Employer mentioned: {bundle.company}")
        if bundle.institution:
            lines.append(f"School mentioned: {bundle.institution}")
        if bundle.skills:
            lines.append(f"Skills listed: {', '.join(bundle.skills[:5])}")
        if bundle.buzzwords:
            lines.append(f"Buzzwords used: {', '.join(bundle.buzzwords)}")
        if not bundle.has_experience_mention:
            lines.append("No work experience mentioned.")
    else:
        lines.append(f"Twitter Handle: @{bundle.handle}")
        if bundle.has_numbers:
            lines.append("The handle has numbers in it.")
        if bundle.has_underscores:
            lines.append("The handle has underscores in it.")
        if bundle.is_all_caps:
            lines.append("The handle is ALL CAPS.")
        if bundle.common_terms:
            lines.append(f"The handle contains: {', '.join(bundle.common_terms)}")

    lines.append("")
    lines.append("Roast:")
    return "\n".join(lines)


async def _generate_llm_text(bundle: SignalBundle) -> str:
    raw_key = os.environ.get("ANTHROPIC_API_KEY", "")
    api_key = "".join(raw_key.split())
    if not api_key:
        raise UpstreamGenerationFailure("ANTHROPIC_API_KEY not set")

    client = anthropic.AsyncAnthropic(api_key=api_key)
    try:
        message = await asyncio.wait_for(
            client.messages.create(
                model=MODEL,
                max_tokens=500,
                temperature=1.0,
                system=SYSTEM_PROMPT,
                messages=[{"role": "user", "content": _build_prompt(bundle)}],
            ),
            timeout=ROAST_TIMEOUT,
        )
    except asyncio.TimeoutError as e:
        raise UpstreamGenerationFailure(f"LLM timed out after {ROAST_TIMEOUT}s") from e
    except Exception as e:
        raise UpstreamGenerationFailure(f"LLM call failed: {e}") from e

    try:
        text = message.content[0].text.strip()
    except (AttributeError, IndexError, TypeError) as e:
        raise UpstreamGenerationFailure("LLM returned no text block") from e
    if not text:
        raise UpstreamGenerationFailure("LLM returned empty content")
    return text


async def generate_roast(category: Category | str, content: str, rng: random.Random | None = None) -> RoastResult:
    """Run the full pipeline on already-validated content."""
    category = Category(category)
    bundle = extract(category, content)

    try:
        text = await _generate_llm_text(bundle)
        source = "llm"
    except UpstreamGenerationFailure as e:
        logger.warning(f"Falling back to template roast: {e}")
        text = generate(category, bundle, rng)
        source = "template"

    return format_result(text, scorer.score(text), rng, source=source)
