from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from modules.phone_compare.adapters.schemas import (
    CategoryNameV1,
    ComparisonCategoryV1,
    PhoneScoresV1,
    PhoneV1,
    SpecComparisonV1,
)
from modules.phone_compare.domain import narrative
from modules.phone_compare.domain.category_comparison import (
    category_winner,
    compare_battery,
    compare_build,
    compare_camera,
    compare_display,
    compare_performance,
    compare_value,
)
from modules.phone_compare.domain.scoring import (
    clamp_score,
    score_battery,
    score_build,
    score_camera,
    score_display,
    score_performance,
    score_value,
)

Scorer = Callable[[PhoneV1, date], int]
Comparator = Callable[[PhoneV1, PhoneV1], list[SpecComparisonV1]]


@dataclass(frozen=True)
class CategoryDefinition:
    name: CategoryNameV1
    display_name: str
    weight: float
    scorer: Scorer
    comparator: Comparator


CATEGORIES: tuple[CategoryDefinition, ...] = (
    CategoryDefinition(CategoryNameV1.display, "Display", 0.20, score_display, compare_display),
    CategoryDefinition(CategoryNameV1.camera, "Camera", 0.25, score_camera, compare_camera),
    CategoryDefinition(
        CategoryNameV1.performance, "Performance", 0.20, score_performance, compare_performance
    ),
    CategoryDefinition(CategoryNameV1.battery, "Battery", 0.15, score_battery, compare_battery),
    CategoryDefinition(CategoryNameV1.build, "Build Quality", 0.10, score_build, compare_build),
    CategoryDefinition(CategoryNameV1.value, "Value for Money", 0.10, score_value, compare_value),
)

CATEGORY_WEIGHTS: dict[CategoryNameV1, float] = {c.name: c.weight for c in CATEGORIES}


def aggregate_scores(raw: dict[CategoryNameV1, int]) -> PhoneScoresV1:
    # Weighted sum in hundredths so .5 always rounds up, free of float drift.
    weighted = sum(raw[name] * round(weight * 100) for name, weight in CATEGORY_WEIGHTS.items())
    overall = (weighted + 50) // 100
    return PhoneScoresV1(
        overall=clamp_score(overall),
        **{name.value: clamp_score(raw[name]) for name in CATEGORY_WEIGHTS},
    )


def score_phone(phone: PhoneV1, as_of: date) -> PhoneScoresV1:
    return aggregate_scores({c.name: c.scorer(phone, as_of) for c in CATEGORIES})


def build_categories(phone1: PhoneV1, phone2: PhoneV1) -> list[ComparisonCategoryV1]:
    categories: list[ComparisonCategoryV1] = []
    for definition in CATEGORIES:
        comparisons = definition.comparator(phone1, phone2)
        winner = category_winner(comparisons)
        categories.append(
            ComparisonCategoryV1(
                name=definition.name,
                display_name=definition.display_name,
                weight=definition.weight,
                comparisons=comparisons,
                winner=winner,
                summary=narrative.category_summary(
                    definition.name.value, winner, phone1, phone2
                ),
            )
        )
    return categories
