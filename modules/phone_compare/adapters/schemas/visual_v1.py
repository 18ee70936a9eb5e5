from pydantic import BaseModel, Field

from modules.phone_compare.adapters.schemas.v1 import (
    CategoryNameV1,
    ComparisonWinnerV1,
    ImportanceV1,
    PhonePairScoresV1,
)

_FROZEN = {"extra": "forbid", "frozen": True}


class PhoneCardV1(BaseModel):
    id: str
    name: str
    image: str = ""
    price: float
    overall_score: int

    model_config = _FROZEN


class PhoneCardPairV1(BaseModel):
    phone1: PhoneCardV1
    phone2: PhoneCardV1

    model_config = _FROZEN


class VisualSpecRowV1(BaseModel):
    label: str
    phone1_value: str
    phone2_value: str
    winner: ComparisonWinnerV1
    importance: ImportanceV1

    model_config = _FROZEN


class VisualCategoryV1(BaseModel):
    name: CategoryNameV1
    display_name: str
    winner: ComparisonWinnerV1
    phone1_score: int
    phone2_score: int
    comparisons: tuple[VisualSpecRowV1, ...] = ()

    model_config = _FROZEN


class VisualSummaryV1(BaseModel):
    winner: ComparisonWinnerV1
    winner_name: str
    key_differences: tuple[str, ...] = Field(default=(), max_length=3)
    recommendations: tuple[str, ...] = ()

    model_config = _FROZEN


class CategoryBreakdownPointV1(BaseModel):
    category: str
    phone1: int
    phone2: int

    model_config = _FROZEN


class VisualChartsV1(BaseModel):
    score_comparison: PhonePairScoresV1
    category_breakdown: tuple[CategoryBreakdownPointV1, ...]

    model_config = _FROZEN


class VisualComparisonV1(BaseModel):
    phones: PhoneCardPairV1
    categories: tuple[VisualCategoryV1, ...]
    summary: VisualSummaryV1
    charts: VisualChartsV1

    model_config = _FROZEN
