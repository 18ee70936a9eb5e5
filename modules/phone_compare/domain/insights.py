from __future__ import annotations

from modules.phone_compare.adapters.schemas import (
    CategoryNameV1,
    ComparisonInsightsV1,
    PerPhoneListV1,
    PhoneScoresV1,
    PhoneV1,
)
from modules.phone_compare.domain import narrative

STRENGTH_MARGIN = 5
RECOMMENDATION_MARGIN = 10
CHEAPER_PRICE_RATIO = 0.8

STRENGTH_LABELS: dict[CategoryNameV1, str] = {
    CategoryNameV1.display: "display quality",
    CategoryNameV1.camera: "camera performance",
    CategoryNameV1.performance: "processing power",
    CategoryNameV1.battery: "battery life",
    CategoryNameV1.build: "build quality",
    CategoryNameV1.value: "value for money",
}

BEST_FOR_TAGS: dict[CategoryNameV1, str] = {
    CategoryNameV1.camera: "Photography and content creation",
    CategoryNameV1.performance: "Gaming and heavy multitasking",
    CategoryNameV1.battery: "Long usage sessions and travel",
    CategoryNameV1.value: "Budget-conscious buyers",
    CategoryNameV1.display: "Media consumption and streaming",
}


def _leads(own: PhoneScoresV1, other: PhoneScoresV1, category: CategoryNameV1, margin: int) -> bool:
    return own.for_category(category) > other.for_category(category) + margin


def identify_strengths(own: PhoneScoresV1, other: PhoneScoresV1) -> list[str]:
    return [
        label
        for category, label in STRENGTH_LABELS.items()
        if _leads(own, other, category, STRENGTH_MARGIN)
    ]


def identify_weaknesses(own: PhoneScoresV1, other: PhoneScoresV1) -> list[str]:
    return [
        label
        for category, label in STRENGTH_LABELS.items()
        if _leads(other, own, category, STRENGTH_MARGIN)
    ]


def best_for_scenarios(own: PhoneScoresV1, other: PhoneScoresV1) -> list[str]:
    return [
        tag
        for category, tag in BEST_FOR_TAGS.items()
        if _leads(own, other, category, STRENGTH_MARGIN)
    ]


def generate_recommendations(
    phone1: PhoneV1,
    phone2: PhoneV1,
    scores1: PhoneScoresV1,
    scores2: PhoneScoresV1,
) -> list[str]:
    recommendations: list[str] = []

    price1 = phone1.pricing.current_price
    price2 = phone2.pricing.current_price
    if price1 < price2 * CHEAPER_PRICE_RATIO:
        recommendations.append(narrative.value_recommendation(phone1))
    elif price2 < price1 * CHEAPER_PRICE_RATIO:
        recommendations.append(narrative.value_recommendation(phone2))

    if _leads(scores1, scores2, CategoryNameV1.performance, RECOMMENDATION_MARGIN):
        recommendations.append(narrative.performance_recommendation(phone1))
    elif _leads(scores2, scores1, CategoryNameV1.performance, RECOMMENDATION_MARGIN):
        recommendations.append(narrative.performance_recommendation(phone2))

    if _leads(scores1, scores2, CategoryNameV1.camera, RECOMMENDATION_MARGIN):
        recommendations.append(narrative.camera_recommendation(phone1))
    elif _leads(scores2, scores1, CategoryNameV1.camera, RECOMMENDATION_MARGIN):
        recommendations.append(narrative.camera_recommendation(phone2))

    return recommendations


def generate_insights(
    phone1: PhoneV1,
    phone2: PhoneV1,
    scores1: PhoneScoresV1,
    scores2: PhoneScoresV1,
) -> ComparisonInsightsV1:
    return ComparisonInsightsV1(
        strengths=PerPhoneListV1(
            phone1=identify_strengths(scores1, scores2),
            phone2=identify_strengths(scores2, scores1),
        ),
        weaknesses=PerPhoneListV1(
            phone1=identify_weaknesses(scores1, scores2),
            phone2=identify_weaknesses(scores2, scores1),
        ),
        recommendations=generate_recommendations(phone1, phone2, scores1, scores2),
        best_for=PerPhoneListV1(
            phone1=best_for_scenarios(scores1, scores2),
            phone2=best_for_scenarios(scores2, scores1),
        ),
    )
