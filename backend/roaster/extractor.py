"""Content extractor: naive signals pulled out of a submission before roasting."""

import re

from backend.roaster.models import Category, SignalBundle

# --- Resume vocabularies ---
EDUCATION_KEYWORDS = (
    "education", "university", "college", "degree", "bachelor", "master",
    "phd", "school", "graduated", "diploma", "gpa", "mba",
)
EXPERIENCE_KEYWORDS = (
    "experience", "worked", "work history", "employment", "job", "position",
    "role", "intern", "internship", "employed", "manager", "career",
)
SKILLS_KEYWORDS = (
    "skill", "skills", "proficient", "expertise", "technologies", "tools",
    "competencies", "familiar with",
)
BUZZWORDS = (
    "synergy", "leverage", "proactive", "results-driven", "team player",
    "detail-oriented", "go-getter", "thought leader", "self-starter",
    "dynamic", "passionate", "innovative", "strategic", "disruptive",
    "rockstar", "ninja", "guru", "hard-working", "out of the box",
)
TECHNICAL_SKILLS = (
    "python", "java", "javascript", "typescript", "sql", "react", "node",
    "aws", "azure", "docker", "kubernetes", "machine learning", "data analysis",
    "html", "css", "golang", "rust", "swift", "linux", "cloud",
)
SOFT_SKILLS = (
    "leadership", "communication", "teamwork", "problem solving",
    "time management", "negotiation", "public speaking", "mentoring",
    "collaboration", "creativity", "adaptability",
)
TOOL_SKILLS = (
    "excel", "powerpoint", "microsoft word", "jira", "git", "figma", "salesforce",
    "photoshop", "tableau", "slack", "notion", "sap", "quickbooks",
)
INSTITUTION_WORDS = ("University", "College", "School", "Institute")
STOPWORDS = {
    "The", "A", "An", "I", "My", "We", "Our", "In", "And", "Of",
    "Education", "Experience", "Skills", "Skill", "Resume", "Summary",
    "Objective", "Profile", "Projects", "References", "Contact", "Work",
    "Professional", "Bachelor", "Bachelors", "Master", "Masters", "Degree",
    "Senior", "Junior", "Lead", "Manager", "Engineer", "Developer", "Intern",
    "January", "February", "March", "April", "May", "June", "July", "August",
    "September", "October", "November", "December", "Present", "Current",
}

# --- Idea vocabularies ---
TECH_KEYWORDS = (
    "app", "ai", "software", "blockchain", "tech", "technology", "algorithm",
    "website", "digital", "online", "machine learning", "robot", "saas", "api",
)
PRODUCT_KEYWORDS = (
    "product", "device", "gadget", "hardware", "merchandise", "brand",
    "store", "sell", "manufacture", "kit",
)
SERVICE_KEYWORDS = (
    "service", "delivery", "subscription", "consulting", "booking",
    "cleaning", "walking", "tutoring", "rental", "on-demand",
)
PLATFORM_KEYWORDS = (
    "platform", "social", "community", "network", "marketplace",
    "social media", "connect", "sharing",
)
FINANCE_KEYWORDS = (
    "money", "finance", "bank", "payment", "invest", "investment", "crypto",
    "fintech", "loan", "budget", "trading", "stock",
)
MARKET_KEYWORDS = (
    "market", "customer", "user", "audience", "demand", "client",
    "revenue", "competition", "competitor",
)
INNOVATION_KEYWORDS = (
    "innovative", "unique", "first", "revolutionary", "disrupt", "novel",
    "patent", "never been done", "breakthrough",
)
DETAILED_WORD_COUNT = 50

# --- Twitter vocabulary ---
COMMON_HANDLE_TERMS = (
    "crypto", "nft", "official", "guru", "real", "coach", "ceo", "founder",
    "btc", "eth", "web3", "news", "fan", "king", "queen", "daily", "investor",
)

_CAP_WORD = r"[A-Z][A-Za-z0-9&'-]*"
_CAP_RUN = rf"{_CAP_WORD}(?:[ \t]+{_CAP_WORD})*"
COMPANY_NEAR_RE = re.compile(rf"\b(?:[Aa]t|[Ff]or|[Ww]ith)[ \t]+({_CAP_RUN})")
CAP_RUN_RE = re.compile(rf"\b{_CAP_WORD}(?:[ \t]+{_CAP_WORD})+")
INSTITUTION_BEFORE_RE = re.compile(
    rf"\b((?:{_CAP_WORD}[ \t]+){{1,4}})({'|'.join(INSTITUTION_WORDS)})\b"
)
INSTITUTION_AFTER_RE = re.compile(
    rf"\b({'|'.join(INSTITUTION_WORDS)})[ \t]+of[ \t]+({_CAP_RUN})"
)
DEGREE_RE = re.compile(
    r"\b(Ph\.D\.|PhD|MBA|BSc|MSc|BEng|MEng|B\.S\.|B\.A\.|M\.S\.|M\.A\.|BS|BA|MS|MA)(?![A-Za-z])"
)
SECTION_LABELS = ("skills", "experience")
TWITTER_LABEL_RE = re.compile(r"^\s*twitter\s+handle\s*:\s*", re.IGNORECASE)
SKILL_MIN_LEN = 4
SKILL_MAX_LEN = 19


def _keyword_re(keyword: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(keyword)}s?\b", re.IGNORECASE)


def _matches(text: str, keywords) -> list[str]:
    """Keywords found in text as whole words (an optional plural 's' allowed)."""
    return [kw for kw in keywords if _keyword_re(kw).search(text)]


def _contains_any(text: str, keywords) -> bool:
    return any(_keyword_re(kw).search(text) for kw in keywords)


def _trim_stopwords(run: str) -> str:
    words = run.split()
    while words and words[0] in STOPWORDS:
        words.pop(0)
    while words and words[-1] in STOPWORDS:
        words.pop()
    return " ".join(words)


def _labeled_section(text: str) -> str | None:
    for label in SECTION_LABELS:
        m = re.search(rf"^[ \t]*{label}[ \t]*:[ \t]*(.*)$", text, re.IGNORECASE | re.MULTILINE)
        if not m:
            continue
        body = m.group(1).strip()
        if not body:
            body = text[m.end():].lstrip("\n").split("\n\n", 1)[0]
        return body
    return None


def _dedupe(items) -> tuple[str, ...]:
    seen = set()
    out = []
    for item in items:
        key = item.lower()
        if key not in seen:
            seen.add(key)
            out.append(item)
    return tuple(out)


def _extract_skills(text: str) -> tuple[str, ...]:
    section = _labeled_section(text)
    if section:
        fragments = [f.strip(" \t-•*") for f in re.split(r"[,.;\n]", section)]
        kept = [f for f in fragments if SKILL_MIN_LEN <= len(f) <= SKILL_MAX_LEN]
        if kept:
            return _dedupe(kept)

    found = []
    for vocab in (TECHNICAL_SKILLS, SOFT_SKILLS, TOOL_SKILLS):
        for term in vocab:
            m = re.search(rf"\b{re.escape(term)}\b", text, re.IGNORECASE)
            if m:
                found.append(m.group(0))
    return _dedupe(found)


def _is_company_candidate(run: str) -> bool:
    return bool(run) and not any(w in run.split() for w in INSTITUTION_WORDS)


def _extract_company(text: str) -> str:
    near = [_trim_stopwords(m.group(1)) for m in COMPANY_NEAR_RE.finditer(text)]
    near = [r for r in near if _is_company_candidate(r)]
    if near:
        return max(near, key=len)

    generic = [_trim_stopwords(m.group(0)) for m in CAP_RUN_RE.finditer(text)]
    generic = [r for r in generic if _is_company_candidate(r) and len(r.split()) >= 2]
    if generic:
        return max(generic, key=len)
    return ""


def _extract_institution(text: str) -> str:
    m = INSTITUTION_BEFORE_RE.search(text)
    if m:
        prefix = _trim_stopwords(m.group(1))
        if prefix:
            return f"{prefix} {m.group(2)}"
    m = INSTITUTION_AFTER_RE.search(text)
    if m:
        return f"{m.group(1)} of {m.group(2)}"
    m = DEGREE_RE.search(text)
    if m:
        return m.group(1)
    return ""


def normalize_handle(raw: str) -> str:
    """Strip an optional 'Twitter handle:' label and a leading '@'."""
    handle = TWITTER_LABEL_RE.sub("", raw.strip()).strip()
    if handle.startswith("@"):
        handle = handle[1:]
    return handle.strip()


def _extract_resume(text: str, lower: str) -> dict:
    return {
        "has_education_mention": _contains_any(lower, EDUCATION_KEYWORDS),
        "has_experience_mention": _contains_any(lower, EXPERIENCE_KEYWORDS),
        "has_skills_mention": _contains_any(lower, SKILLS_KEYWORDS),
        "buzzwords": tuple(_matches(lower, BUZZWORDS)),
        "skills": _extract_skills(text),
        "company": _extract_company(text),
        "institution": _extract_institution(text),
    }


def _extract_idea(text: str, lower: str, word_count: int) -> dict:
    return {
        "has_tech": _contains_any(lower, TECH_KEYWORDS),
        "has_product": _contains_any(lower, PRODUCT_KEYWORDS),
        "has_service": _contains_any(lower, SERVICE_KEYWORDS),
        "has_platform": _contains_any(lower, PLATFORM_KEYWORDS),
        "has_finance": _contains_any(lower, FINANCE_KEYWORDS),
        "has_market": _contains_any(lower, MARKET_KEYWORDS),
        "has_innovation": _contains_any(lower, INNOVATION_KEYWORDS),
        "is_detailed": word_count > DETAILED_WORD_COUNT,
        "mentions_app": "app" in lower,
    }


def _extract_twitter(text: str) -> dict:
    handle = normalize_handle(text)
    lower = handle.lower()
    return {
        "handle": handle,
        "handle_length": len(handle),
        "has_numbers": any(c.isdigit() for c in handle),
        "has_underscores": "_" in handle,
        "is_all_caps": len(handle) > 3 and handle.isupper(),
        "common_terms": tuple(t for t in COMMON_HANDLE_TERMS if t in lower),
    }


def extract(category: Category | str, raw_text: str) -> SignalBundle:
    """Extract a SignalBundle from raw submission text. Deterministic, no I/O."""
    category = Category(category)
    text = raw_text.strip()
    if not text:
        return SignalBundle(category=category, raw_text="")

    lower = text.lower()
    word_count = len(text.split())
    fields = {"word_count": word_count, "text_length": len(text)}

    if category is Category.RESUME:
        fields.update(_extract_resume(text, lower))
    elif category is Category.IDEA:
        fields.update(_extract_idea(text, lower, word_count))
    else:
        fields.update(_extract_twitter(text))

    return SignalBundle(category=category, raw_text=text, **fields)
