"""Pydantic models passed between the roast pipeline stages."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Category(str, Enum):
    IDEA = "idea"
    RESUME = "resume"
    TWITTER = "twitter"


class SignalBundle(BaseModel):
    """Facts extracted from one submission. Flags not relevant to the category stay False."""

    model_config = ConfigDict(frozen=True)

    category: Category
    raw_text: str
    word_count: int = 0
    text_length: int = 0

    # resume
    has_education_mention: bool = False
    has_experience_mention: bool = False
    has_skills_mention: bool = False
    buzzwords: tuple[str, ...] = ()
    skills: tuple[str, ...] = ()
    company: str = ""
    institution: str = ""

    # idea
    has_tech: bool = False
    has_product: bool = False
    has_service: bool = False
    has_platform: bool = False
    has_finance: bool = False
    has_market: bool = False
    has_innovation: bool = False
    is_detailed: bool = False
    mentions_app: bool = False

    # twitter
    handle: str = ""
    handle_length: int = 0
    has_numbers: bool = False
    has_underscores: bool = False
    is_all_caps: bool = False
    common_terms: tuple[str, ...] = ()

    @property
    def entity(self) -> str:
        """Best-guess company or institution name, or empty."""
        return self.company or self.institution


class RoastResult(BaseModel):
    text: str
    score: int
    is_executive_order: bool
    reward_tokens: int
    image_url: str
    source: str = "template"

    def to_response(self) -> dict:
        return {
            "roast": self.text,
            "score": self.score,
            "isExecutiveOrder": self.is_executive_order,
            "rewardTokens": self.reward_tokens,
            "imageUrl": self.image_url,
            "source": self.source,
        }
