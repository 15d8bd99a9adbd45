from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EaseOfUse(str, Enum):
    """Ease-of-use rating vocabulary."""

    VERY_EASY = "Very Easy"
    EASY = "Easy"
    MODERATE = "Moderate"
    DIFFICULT = "Difficult"
    VERY_DIFFICULT = "Very Difficult"


class DocumentationQuality(str, Enum):
    """Documentation rating vocabulary."""

    EXCELLENT = "Excellent"
    VERY_GOOD = "Very Good"
    GOOD = "Good"
    MODERATE = "Moderate"
    BASIC = "Basic"
    POOR = "Poor"


class CommunitySize(str, Enum):
    """Community rating vocabulary."""

    VERY_LARGE = "Very Large"
    LARGE = "Large"
    MEDIUM = "Medium"
    SMALL_BUT_GROWING = "Small but growing"
    SMALL = "Small"
    LIMITED = "Limited"


class Reliability(str, Enum):
    """Reliability rating vocabulary."""

    VERY_HIGH = "Very High"
    HIGH = "High"
    MODERATE = "Moderate"
    LOW = "Low"
    VERY_LOW = "Very Low"


class RawPricing(BaseModel):
    """Structured pricing data used to refine the pricing score."""

    model_config = ConfigDict(populate_by_name=True)

    model: str = Field(default="", description="Pricing model (freemium, subscription, ...)")
    free_tier: bool = Field(default=False, alias="freeTier")
    starting_price: str | None = Field(
        default=None, alias="startingPrice", description="Free-text price, e.g. '$20/month'"
    )
    pricing_details: str | None = Field(default=None, alias="pricingDetails")


class ToolRecord(BaseModel):
    """A catalogued tool as consumed by the comparison engine.

    Qualitative ratings are kept as plain strings: values outside the
    rating vocabularies are accepted here and scored as neutral later.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Identification
    id: str = Field(description="Stable identifier (slug)")
    name: str = Field(description="Display name")
    category: str = Field(default="", description="Canonical or legacy category key")

    # Descriptive
    description: str = Field(default="")
    pricing_text: str = Field(
        default="", alias="pricingText", description="Free-text pricing description"
    )
    open_source: bool = Field(default=False, alias="openSource")
    api_access: bool = Field(default=False, alias="apiAccess")
    website_url: str = Field(default="", alias="websiteUrl")

    # Qualitative ratings
    ease_of_use: str | None = Field(default=None, alias="easeOfUse")
    reliability: str | None = Field(default=None)
    documentation: str | None = Field(default=None)
    community: str | None = Field(default=None)

    # Refinements
    raw_pricing: RawPricing | None = Field(default=None, alias="rawPricing")
    features: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list, description="Editorial pros")
    limitations: list[str] = Field(default_factory=list, description="Editorial cons")

    @field_validator("ease_of_use", "reliability", "documentation", "community", mode="before")
    @classmethod
    def _non_string_rating_is_unset(cls, value: object) -> object:
        """Ratings that are not text (numbers, lists) are scored as neutral."""
        return value if isinstance(value, str) else None
