from __future__ import annotations

from collections.abc import Sequence

from modules.phone_compare.adapters.schemas import (
    ComparisonWinnerV1,
    ImportanceV1,
    PhoneV1,
    SpecComparisonV1,
)
from modules.phone_compare.domain import narrative
from modules.phone_compare.domain.normalization import (
    availability_rank,
    extract_number,
    materials_tier,
    max_option,
    panel_tier,
    processor_tier,
    resolution_tier,
    water_resistance_tier,
)

IMPORTANCE_VOTES = {
    ImportanceV1.high: 3,
    ImportanceV1.medium: 2,
    ImportanceV1.low: 1,
}

DEFAULT_REFRESH_RATE = 60


def pick_winner(value1: float, value2: float) -> ComparisonWinnerV1:
    if value1 > value2:
        return ComparisonWinnerV1.phone1
    if value2 > value1:
        return ComparisonWinnerV1.phone2
    return ComparisonWinnerV1.tie


def _gap(value1: float, value2: float, unit: str = "") -> str | None:
    if value1 == value2:
        return None
    return narrative.format_magnitude(round(abs(value1 - value2), 2), unit)


def _numeric(
    label: str,
    value1: float,
    value2: float,
    shown1: str,
    shown2: str,
    importance: ImportanceV1,
    unit: str = "",
) -> SpecComparisonV1:
    return SpecComparisonV1(
        category=label,
        phone1_value=shown1,
        phone2_value=shown2,
        winner=pick_winner(value1, value2),
        difference=_gap(value1, value2, unit),
        importance=importance,
    )


def _tiered(
    label: str,
    tier1: int,
    tier2: int,
    shown1: str,
    shown2: str,
    importance: ImportanceV1,
) -> SpecComparisonV1:
    return SpecComparisonV1(
        category=label,
        phone1_value=shown1,
        phone2_value=shown2,
        winner=pick_winner(tier1, tier2),
        importance=importance,
    )


def compare_display(phone1: PhoneV1, phone2: PhoneV1) -> list[SpecComparisonV1]:
    d1 = phone1.specifications.display
    d2 = phone2.specifications.display
    refresh1 = d1.refresh_rate or DEFAULT_REFRESH_RATE
    refresh2 = d2.refresh_rate or DEFAULT_REFRESH_RATE
    return [
        _numeric(
            "Screen Size",
            extract_number(d1.size),
            extract_number(d2.size),
            d1.size,
            d2.size,
            ImportanceV1.high,
            unit='"',
        ),
        _tiered(
            "Resolution",
            resolution_tier(d1.resolution),
            resolution_tier(d2.resolution),
            d1.resolution,
            d2.resolution,
            ImportanceV1.medium,
        ),
        _tiered(
            "Display Type",
            panel_tier(d1.type),
            panel_tier(d2.type),
            d1.type,
            d2.type,
            ImportanceV1.medium,
        ),
        _numeric(
            "Refresh Rate",
            refresh1,
            refresh2,
            narrative.format_optional_rate(d1.refresh_rate, "Hz"),
            narrative.format_optional_rate(d2.refresh_rate, "Hz"),
            ImportanceV1.medium,
            unit="Hz",
        ),
    ]


def compare_camera(phone1: PhoneV1, phone2: PhoneV1) -> list[SpecComparisonV1]:
    c1 = phone1.specifications.camera
    c2 = phone2.specifications.camera
    main1 = c1.rear[0] if c1.rear else None
    main2 = c2.rear[0] if c2.rear else None
    return [
        _numeric(
            "Main Camera",
            main1.megapixels if main1 else 0,
            main2.megapixels if main2 else 0,
            narrative.format_camera(main1),
            narrative.format_camera(main2),
            ImportanceV1.high,
            unit="MP",
        ),
        _numeric(
            "Front Camera",
            c1.front.megapixels,
            c2.front.megapixels,
            narrative.format_camera(c1.front),
            narrative.format_camera(c2.front),
            ImportanceV1.medium,
            unit="MP",
        ),
        _numeric(
            "Camera Count",
            len(c1.rear),
            len(c2.rear),
            f"{len(c1.rear)} cameras",
            f"{len(c2.rear)} cameras",
            ImportanceV1.low,
        ),
    ]


def compare_performance(phone1: PhoneV1, phone2: PhoneV1) -> list[SpecComparisonV1]:
    p1 = phone1.specifications.performance
    p2 = phone2.specifications.performance
    return [
        _tiered(
            "Processor",
            processor_tier(p1.processor),
            processor_tier(p2.processor),
            p1.processor,
            p2.processor,
            ImportanceV1.high,
        ),
        _numeric(
            "RAM Options",
            max_option(p1.ram),
            max_option(p2.ram),
            narrative.format_list(p1.ram),
            narrative.format_list(p2.ram),
            ImportanceV1.medium,
            unit="GB",
        ),
        _numeric(
            "Storage Options",
            max_option(p1.storage),
            max_option(p2.storage),
            narrative.format_list(p1.storage),
            narrative.format_list(p2.storage),
            ImportanceV1.medium,
            unit="GB",
        ),
    ]


def compare_battery(phone1: PhoneV1, phone2: PhoneV1) -> list[SpecComparisonV1]:
    b1 = phone1.specifications.battery
    b2 = phone2.specifications.battery
    return [
        _numeric(
            "Battery Capacity",
            b1.capacity,
            b2.capacity,
            f"{b1.capacity}mAh",
            f"{b2.capacity}mAh",
            ImportanceV1.high,
            unit="mAh",
        ),
        _numeric(
            "Charging Speed",
            b1.charging_speed or 0,
            b2.charging_speed or 0,
            narrative.format_optional_rate(b1.charging_speed, "W"),
            narrative.format_optional_rate(b2.charging_speed, "W"),
            ImportanceV1.medium,
            unit="W",
        ),
        _tiered(
            "Wireless Charging",
            int(bool(b1.wireless_charging)),
            int(bool(b2.wireless_charging)),
            narrative.format_flag(b1.wireless_charging),
            narrative.format_flag(b2.wireless_charging),
            ImportanceV1.low,
        ),
    ]


def compare_build(phone1: PhoneV1, phone2: PhoneV1) -> list[SpecComparisonV1]:
    b1 = phone1.specifications.build
    b2 = phone2.specifications.build
    return [
        _tiered(
            "Materials",
            materials_tier(b1.materials),
            materials_tier(b2.materials),
            narrative.format_list(b1.materials),
            narrative.format_list(b2.materials),
            ImportanceV1.medium,
        ),
        _tiered(
            "Water Resistance",
            water_resistance_tier(b1.water_resistance),
            water_resistance_tier(b2.water_resistance),
            b1.water_resistance or "None",
            b2.water_resistance or "None",
            ImportanceV1.medium,
        ),
        _numeric(
            "Color Options",
            len(b1.colors),
            len(b2.colors),
            f"{len(b1.colors)} colors",
            f"{len(b2.colors)} colors",
            ImportanceV1.low,
        ),
    ]


def compare_value(phone1: PhoneV1, phone2: PhoneV1) -> list[SpecComparisonV1]:
    price1 = phone1.pricing.current_price
    price2 = phone2.pricing.current_price
    return [
        SpecComparisonV1(
            category="Price",
            phone1_value=narrative.format_price(price1),
            phone2_value=narrative.format_price(price2),
            # cheaper wins
            winner=pick_winner(-price1, -price2),
            difference=narrative.format_price(abs(price1 - price2)) if price1 != price2 else None,
            importance=ImportanceV1.high,
        ),
        _tiered(
            "Availability",
            availability_rank(phone1.availability),
            availability_rank(phone2.availability),
            phone1.availability.value,
            phone2.availability.value,
            ImportanceV1.medium,
        ),
    ]


def category_winner(comparisons: Sequence[SpecComparisonV1]) -> ComparisonWinnerV1:
    phone1_votes = 0
    phone2_votes = 0
    for comparison in comparisons:
        votes = IMPORTANCE_VOTES[comparison.importance]
        if comparison.winner == ComparisonWinnerV1.phone1:
            phone1_votes += votes
        elif comparison.winner == ComparisonWinnerV1.phone2:
            phone2_votes += votes
    return pick_winner(phone1_votes, phone2_votes)
