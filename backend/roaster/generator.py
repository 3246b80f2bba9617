"""Template roast generator, used whenever the LLM is unavailable."""

import random

from backend.roaster import phrases
from backend.roaster.models import Category, SignalBundle

IDEA_SNIPPET_LEN = 40
IDEA_LONG_CHARS = 200
IDEA_MEDIUM_CHARS = 100
HANDLE_TOO_LONG = 12
HANDLE_TOO_SHORT = 5
MAX_SKILLS_ECHOED = 2


def _resume_sentences(bundle: SignalBundle, rng: random.Random) -> list[str]:
    lines = [phrases.RESUME_OPENING]

    if bundle.has_education_mention and bundle.institution:
        lines.append(phrases.RESUME_EDUCATION_INSTITUTION.format(institution=bundle.institution))
    elif bundle.has_education_mention:
        lines.append(phrases.RESUME_EDUCATION_PRESENT)
    else:
        lines.append(phrases.RESUME_EDUCATION_ABSENT)

    if bundle.has_experience_mention and bundle.company:
        lines.append(phrases.RESUME_EXPERIENCE_COMPANY.format(company=bundle.company))
    elif bundle.has_experience_mention:
        lines.append(phrases.RESUME_EXPERIENCE_PRESENT)
    else:
        lines.append(phrases.RESUME_EXPERIENCE_ABSENT)

    if bundle.skills:
        named = " and ".join(bundle.skills[:MAX_SKILLS_ECHOED])
        lines.append(phrases.RESUME_SKILLS_LISTED.format(skills=named))
    elif bundle.has_skills_mention:
        lines.append(phrases.RESUME_SKILLS_PRESENT)
    else:
        lines.append(phrases.RESUME_SKILLS_ABSENT)

    if bundle.buzzwords:
        lines.append(phrases.RESUME_BUZZWORDS.format(buzzword=bundle.buzzwords[0]))

    lines.append(phrases.RESUME_CLOSING)
    return lines


def _idea_snippet(text: str) -> str:
    if len(text) <= IDEA_SNIPPET_LEN:
        return text
    return text[:IDEA_SNIPPET_LEN].rstrip() + "..."


def _idea_sentences(bundle: SignalBundle, rng: random.Random) -> list[str]:
    text = bundle.raw_text
    lines = [phrases.IDEA_OPENING.format(snippet=_idea_snippet(text))]

    if len(text) > IDEA_LONG_CHARS:
        lines.append(phrases.IDEA_LENGTH_LONG)
    elif len(text) > IDEA_MEDIUM_CHARS:
        lines.append(phrases.IDEA_LENGTH_MEDIUM)
    else:
        lines.append(phrases.IDEA_LENGTH_SHORT)

    for flag, sentence in phrases.IDEA_TOPIC.items():
        if getattr(bundle, flag):
            lines.append(sentence)
    for flag, sentence in phrases.IDEA_CRITIQUE.items():
        if not getattr(bundle, flag):
            lines.append(sentence)

    lines.append(rng.choice(phrases.IDEA_COMPETITORS))
    lines.append(phrases.IDEA_APP if bundle.mentions_app else phrases.IDEA_NO_APP)
    lines.append(rng.choice(phrases.IDEA_CLOSINGS))
    return lines


def _handle_shape_sentence(bundle: SignalBundle) -> str:
    if bundle.has_underscores:
        return phrases.TWITTER_UNDERSCORES.format(handle=bundle.handle)
    if bundle.handle_length > HANDLE_TOO_LONG:
        return phrases.TWITTER_TOO_LONG
    if bundle.handle_length < HANDLE_TOO_SHORT:
        return phrases.TWITTER_TOO_SHORT
    return phrases.TWITTER_DEFAULT


def _twitter_sentences(bundle: SignalBundle, rng: random.Random) -> list[str]:
    return [
        phrases.TWITTER_OPENING.format(handle=bundle.handle),
        _handle_shape_sentence(bundle),
        rng.choice(phrases.TWITTER_FOLLOWERS),
        rng.choice(phrases.TWITTER_CONTENT),
        phrases.TWITTER_COMPARE,
        phrases.TWITTER_ENGAGEMENT,
        rng.choice(phrases.TWITTER_CLOSINGS),
    ]


_BUILDERS = {
    Category.RESUME: _resume_sentences,
    Category.IDEA: _idea_sentences,
    Category.TWITTER: _twitter_sentences,
}


def generate(category: Category | str, bundle: SignalBundle, rng: random.Random | None = None) -> str:
    """Render a roast paragraph from the extracted signals.

    Random picks are uniform over each fixed pool. Pass ``rng`` for
    reproducible output; otherwise every call gets its own generator.
    """
    rng = rng or random.Random()
    sentences = _BUILDERS[Category(category)](bundle, rng)
    return " ".join(s.strip() for s in sentences if s.strip())
