# schemas.py  (stash records, form drafts, enrichment and analytics shapes)

from __future__ import annotations
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from uuid import uuid4
from pydantic import BaseModel, Field, ConfigDict, field_validator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def new_id() -> str:
    return str(uuid4())

def as_utc(v: datetime) -> datetime:
    # naive timestamps on disk are read as UTC
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v


# ===================== Enums =====================

class ProductCategory(str, Enum):
    FLOWER = "Flower"
    EDIBLE = "Edible"
    VAPE = "Vape"
    CONCENTRATE = "Concentrate"
    PSYCHEDELIC_OTHER = "Psychedelic (Other)"

class StrainType(str, Enum):
    INDICA = "Indica"
    SATIVA = "Sativa"
    HYBRID = "Hybrid"
    UNKNOWN = "Unknown"

    @classmethod
    def parse(cls, value: object) -> "StrainType":
        for member in cls:
            if value == member.value:
                return member
        return cls.UNKNOWN

class Mood(str, Enum):
    """Ordered mood scale; declaration order is the ranking."""
    LOW = "Low"
    NEUTRAL = "Neutral"
    GOOD = "Good"
    GREAT = "Great"

    @property
    def score(self) -> int:
        return list(Mood).index(self) + 1

    @classmethod
    def score_of(cls, value: object) -> int:
        """Numeric projection for charting; anything unrecognised counts as Neutral."""
        try:
            return cls(value).score
        except ValueError:
            return cls.NEUTRAL.score

class DosageUnit(str, Enum):
    MG = "mg"
    G = "g"

class DateFormat(str, Enum):
    US = "MM/DD/YYYY"
    EU = "DD/MM/YYYY"


# ===================== Stored records =====================

class Terpene(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    percentage: Optional[float] = None      # 0-100 scale, unvalidated
    description: Optional[str] = None

class Product(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    category: ProductCategory
    brand_name: str = ""
    product_name: str
    flavor_or_variant: Optional[str] = None
    form_factor: str = "Unknown"            # joint, gummy, cart...
    thc_mg_per_unit: Optional[float] = None  # mg for edibles/psychedelics, % otherwise
    cbd_mg_per_unit: Optional[float] = None
    dosage_description: Optional[str] = None
    strain_type: StrainType = StrainType.UNKNOWN
    tags: List[str] = Field(default_factory=list)
    source: Optional[str] = None
    terpenes: List[Terpene] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("created_at", "updated_at")
    @classmethod
    def stamps_in_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

class Session(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    product_id: str
    date_time_used: datetime
    dose_amount: str = "Standard"
    setting: str = "Home"
    method: str = "Unknown"
    onset_minutes: Optional[int] = None
    duration_minutes: Optional[int] = None
    # nominal 1-10; only the draft boundary constrains input
    intensity_rating: int = 5
    overall_rating: int = 5
    # free strings on disk; Mood gives the ordering
    mood_before: str = Mood.NEUTRAL.value
    mood_after: str = Mood.GOOD.value
    notes: Optional[str] = None
    created_at: datetime = Field(default_factory=utc_now)

    @field_validator("date_time_used", "created_at")
    @classmethod
    def stamps_in_utc(cls, v: datetime) -> datetime:
        return as_utc(v)

class Preferences(BaseModel):
    dosageUnit: DosageUnit = DosageUnit.MG
    dateFormat: DateFormat = DateFormat.US
    privateProfile: bool = True

class UserProfile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = "Guest User"
    email: str = ""
    preferences: Preferences = Field(default_factory=Preferences)


# ===================== Drafts (form boundary) =====================

class TerpeneDraft(BaseModel):
    name: str
    percentage: Optional[float] = None
    description: Optional[str] = None

class ProductDraft(BaseModel):
    # ignore unknown keys instead of 422 if clients send extras
    model_config = ConfigDict(extra="ignore")

    category: ProductCategory = ProductCategory.FLOWER
    brand_name: Optional[str] = None
    product_name: str = Field(min_length=1)
    flavor_or_variant: Optional[str] = None
    form_factor: Optional[str] = None
    thc_mg_per_unit: Optional[float] = None
    cbd_mg_per_unit: Optional[float] = None
    dosage_description: Optional[str] = None
    strain_type: Optional[StrainType] = None
    tags: Optional[List[str]] = None
    source: Optional[str] = None
    terpenes: Optional[List[TerpeneDraft]] = None

class SessionDraft(BaseModel):
    model_config = ConfigDict(extra="ignore")

    product_id: str = Field(min_length=1)
    date_time_used: Optional[datetime] = None
    dose_amount: Optional[str] = None
    setting: Optional[str] = None
    method: Optional[str] = None
    onset_minutes: Optional[int] = Field(default=None, ge=0)
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    intensity_rating: Optional[int] = Field(default=None, ge=1, le=10)
    overall_rating: Optional[int] = Field(default=None, ge=1, le=10)
    mood_before: Optional[Mood] = None
    mood_after: Optional[Mood] = None
    notes: Optional[str] = None


# ===================== Enrichment =====================

class EnrichRequest(BaseModel):
    brand: Optional[str] = None
    productName: str = ""
    variant: Optional[str] = None
    category: Optional[ProductCategory] = None

class EnrichedTerpene(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    percentage: Optional[float] = None
    effects: Optional[str] = None

class EnrichedProduct(BaseModel):
    model_config = ConfigDict(extra="ignore")

    strain_type: StrainType = StrainType.UNKNOWN
    typical_thc_percentage: Optional[float] = None
    typical_cbd_percentage: Optional[float] = None
    dominant_terpenes: List[EnrichedTerpene] = Field(default_factory=list)
    suggested_tags: List[str] = Field(default_factory=list)
    description_summary: str = ""

    @field_validator("strain_type", mode="before")
    @classmethod
    def known_strain(cls, v):
        return StrainType.parse(v)

    @field_validator("dominant_terpenes", "suggested_tags", "description_summary", mode="before")
    @classmethod
    def null_to_empty(cls, v, info):
        if v is None:
            return "" if info.field_name == "description_summary" else []
        return v


# ===================== Analytics =====================

class TagStat(BaseModel):
    tag: str
    avg: float
    count: int
    top_product: Optional[Product] = None

class Recommendation(BaseModel):
    tag: str
    product: Product
    avg_rating: float
    session_count: int

class WeeklyUsage(BaseModel):
    counts: List[int]
    labels: List[str]

class MoodTrend(BaseModel):
    labels: List[str]
    before: List[int]
    after: List[int]

class CompoundCount(BaseModel):
    name: str
    count: int

class CategoryStat(BaseModel):
    category: str
    count: int
    percentage: float

class Dashboard(BaseModel):
    ready: bool
    session_count: int
    required_sessions: int
    avg_rating: Optional[float] = None
    recommendations: List[Recommendation] = Field(default_factory=list)
    weekly_usage: Optional[WeeklyUsage] = None
    mood_trend: Optional[MoodTrend] = None
    tag_stats: List[TagStat] = Field(default_factory=list)
    top_compounds: List[CompoundCount] = Field(default_factory=list)
    categories: List[CategoryStat] = Field(default_factory=list)

class ProductDetail(BaseModel):
    product: Product
    sessions: List[Session]
    avg_rating: Optional[float] = None
    rating_label: str


__all__ = [
    "utc_now", "new_id", "as_utc",
    "ProductCategory", "StrainType", "Mood", "DosageUnit", "DateFormat",
    "Terpene", "Product", "Session", "Preferences", "UserProfile",
    "TerpeneDraft", "ProductDraft", "SessionDraft",
    "EnrichRequest", "EnrichedTerpene", "EnrichedProduct",
    "TagStat", "Recommendation", "WeeklyUsage", "MoodTrend",
    "CompoundCount", "CategoryStat", "Dashboard", "ProductDetail",
]
