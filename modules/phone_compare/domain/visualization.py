from __future__ import annotations

from modules.phone_compare.adapters.schemas import (
    CategoryBreakdownPointV1,
    ComparisonResultV1,
    PhoneCardPairV1,
    PhoneCardV1,
    PhoneScoresV1,
    PhoneV1,
    VisualCategoryV1,
    VisualChartsV1,
    VisualComparisonV1,
    VisualSpecRowV1,
    VisualSummaryV1,
)
from modules.phone_compare.domain import narrative

KEY_DIFFERENCE_LIMIT = 3
PRICE_GAP_THRESHOLD = 10_000
MAIN_CAMERA_GAP_THRESHOLD = 20
BATTERY_GAP_THRESHOLD = 500


def _card(phone: PhoneV1, scores: PhoneScoresV1) -> PhoneCardV1:
    return PhoneCardV1(
        id=phone.id,
        name=phone.display_name,
        image=phone.images[0] if phone.images else "",
        price=phone.pricing.current_price,
        overall_score=scores.overall,
    )


def _main_camera_megapixels(phone: PhoneV1) -> float:
    rear = phone.specifications.camera.rear
    return rear[0].megapixels if rear else 0


def key_differences(phone1: PhoneV1, phone2: PhoneV1) -> list[str]:
    differences: list[str] = []

    price1 = phone1.pricing.current_price
    price2 = phone2.pricing.current_price
    price_gap = abs(price1 - price2)
    if price_gap > PRICE_GAP_THRESHOLD:
        cheaper = phone1 if price1 < price2 else phone2
        differences.append(narrative.cheaper_by(cheaper, price_gap))

    camera1 = _main_camera_megapixels(phone1)
    camera2 = _main_camera_megapixels(phone2)
    if abs(camera1 - camera2) > MAIN_CAMERA_GAP_THRESHOLD:
        better = phone1 if camera1 > camera2 else phone2
        differences.append(narrative.better_main_camera(better))

    capacity1 = phone1.specifications.battery.capacity
    capacity2 = phone2.specifications.battery.capacity
    battery_gap = abs(capacity1 - capacity2)
    if battery_gap > BATTERY_GAP_THRESHOLD:
        larger = phone1 if capacity1 > capacity2 else phone2
        differences.append(narrative.larger_battery(larger, battery_gap))

    return differences[:KEY_DIFFERENCE_LIMIT]


def format_for_visualization(result: ComparisonResultV1) -> VisualComparisonV1:
    phone1, phone2 = result.phones
    scores1 = result.scores.phone1
    scores2 = result.scores.phone2

    categories = [
        VisualCategoryV1(
            name=category.name,
            display_name=category.display_name,
            winner=category.winner,
            phone1_score=scores1.for_category(category.name),
            phone2_score=scores2.for_category(category.name),
            comparisons=[
                VisualSpecRowV1(
                    label=comparison.category,
                    phone1_value=comparison.phone1_value,
                    phone2_value=comparison.phone2_value,
                    winner=comparison.winner,
                    importance=comparison.importance,
                )
                for comparison in category.comparisons
            ],
        )
        for category in result.categories
    ]

    return VisualComparisonV1(
        phones=PhoneCardPairV1(phone1=_card(phone1, scores1), phone2=_card(phone2, scores2)),
        categories=categories,
        summary=VisualSummaryV1(
            winner=result.overall_winner,
            winner_name=narrative.winner_name(result.overall_winner, phone1, phone2),
            key_differences=key_differences(phone1, phone2),
            recommendations=result.insights.recommendations,
        ),
        charts=VisualChartsV1(
            score_comparison=result.scores,
            category_breakdown=[
                CategoryBreakdownPointV1(
                    category=category.display_name,
                    phone1=category.phone1_score,
                    phone2=category.phone2_score,
                )
                for category in categories
            ],
        ),
    )
