"""Templated sentences and display values.

Scoring and comparison code hands plain facts to these helpers; no other
module builds user-facing text.
"""

from __future__ import annotations

from collections.abc import Sequence

from modules.phone_compare.adapters.schemas import (
    CameraSpecV1,
    ComparisonInsightsV1,
    ComparisonWinnerV1,
    PhoneV1,
)

CURRENCY_SYMBOL = "₹"


def format_price(amount: float) -> str:
    return f"{CURRENCY_SYMBOL}{amount:,.0f}"


def format_magnitude(value: float, unit: str = "") -> str:
    return f"{value:g}{unit}"


def format_camera(camera: CameraSpecV1 | None) -> str:
    if camera is None:
        return "N/A"
    aperture = f" f/{camera.aperture}" if camera.aperture else ""
    return f"{format_magnitude(camera.megapixels)}MP{aperture}"


def format_optional_rate(value: float | None, unit: str) -> str:
    return format_magnitude(value, unit) if value else "Standard"


def format_list(values: Sequence[str], empty: str = "N/A") -> str:
    return ", ".join(values) if values else empty


def format_flag(value: bool | None) -> str:
    return "Yes" if value else "No"


def category_summary(
    label: str, winner: ComparisonWinnerV1, phone1: PhoneV1, phone2: PhoneV1
) -> str:
    if winner == ComparisonWinnerV1.phone1:
        return f"{phone1.display_name} has better {label} specifications."
    if winner == ComparisonWinnerV1.phone2:
        return f"{phone2.display_name} has better {label} specifications."
    return f"Both phones have comparable {label} specifications."


def comparison_summary(
    phone1: PhoneV1,
    phone2: PhoneV1,
    winner: ComparisonWinnerV1,
    insights: ComparisonInsightsV1,
) -> str:
    summary = f"Comparison between {phone1.display_name} and {phone2.display_name}. "
    if winner == ComparisonWinnerV1.tie:
        return summary + "Both phones are very competitive with each having their own strengths."

    if winner == ComparisonWinnerV1.phone1:
        name, strengths = phone1.display_name, insights.strengths.phone1
        verdict, lead = "comes out ahead overall", "with strengths in"
    else:
        name, strengths = phone2.display_name, insights.strengths.phone2
        verdict, lead = "takes the lead overall", "with advantages in"
    if not strengths:
        return summary + f"{name} {verdict}."
    return summary + f"{name} {verdict} {lead} {' and '.join(strengths[:2])}."


def value_recommendation(phone: PhoneV1) -> str:
    return (
        f"{phone.display_name} offers better value for money at "
        f"{format_price(phone.pricing.current_price)}"
    )


def performance_recommendation(phone: PhoneV1) -> str:
    return f"Choose {phone.display_name} for better performance and gaming"


def camera_recommendation(phone: PhoneV1) -> str:
    return f"{phone.display_name} is better for photography enthusiasts"


def cheaper_by(phone: PhoneV1, gap: float) -> str:
    return f"{phone.display_name} is {format_price(gap)} cheaper"


def better_main_camera(phone: PhoneV1) -> str:
    return f"{phone.display_name} has significantly better main camera"


def larger_battery(phone: PhoneV1, gap: int) -> str:
    return f"{phone.display_name} has {gap}mAh larger battery"


def winner_name(winner: ComparisonWinnerV1, phone1: PhoneV1, phone2: PhoneV1) -> str:
    if winner == ComparisonWinnerV1.phone1:
        return phone1.display_name
    if winner == ComparisonWinnerV1.phone2:
        return phone2.display_name
    return "Tie"
