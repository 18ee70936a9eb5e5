from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import date

from modules.phone_compare.adapters.schemas import AvailabilityV1

_NUMBER_RE = re.compile(r"(\d+\.?\d*)")

_PROCESSOR_TIERS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (5, ("snapdragon 8", "a17", "a16")),
    (4, ("snapdragon 7", "a15", "dimensity 9")),
    (3, ("snapdragon 6", "dimensity 8")),
    (2, ("snapdragon 4", "dimensity 7")),
)

_WATER_RESISTANCE_TIERS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (4, ("ip68",)),
    (3, ("ip67",)),
    (2, ("ip65", "ip54")),
)

_AVAILABILITY_RANK = {
    AvailabilityV1.available: 3,
    AvailabilityV1.upcoming: 2,
    AvailabilityV1.discontinued: 1,
}

DAYS_PER_MONTH = 30


def _lowered(value: str | None) -> str:
    if not value:
        return ""
    return value.strip().lower()


def extract_number(value: str | None) -> float:
    """First decimal number in ``value``; 0.0 when there is none."""
    if not value:
        return 0.0
    match = _NUMBER_RE.search(value)
    return float(match.group(1)) if match else 0.0


def max_option(options: Iterable[str]) -> float:
    return max((extract_number(option) for option in options), default=0.0)


def resolution_tier(resolution: str | None) -> int:
    text = _lowered(resolution)
    if "1440" in text or "qhd" in text:
        return 4
    if "1080" in text or "fhd" in text:
        return 3
    if "720" in text or "hd" in text:
        return 2
    return 1


def panel_tier(panel_type: str | None) -> int:
    text = _lowered(panel_type)
    if "amoled" in text or "oled" in text:
        return 3
    if "ips" in text:
        return 2
    return 1


def processor_tier(processor: str | None) -> int:
    text = _lowered(processor)
    for tier, markers in _PROCESSOR_TIERS:
        if any(marker in text for marker in markers):
            return tier
    return 1


def _materials_text(materials: Iterable[str]) -> str:
    return " ".join(materials).lower()


def materials_tier(materials: Iterable[str]) -> int:
    text = _materials_text(materials)
    has_glass = "glass" in text
    has_metal = "metal" in text
    if has_glass and has_metal:
        return 3
    if has_glass or has_metal:
        return 2
    return 1


def has_premium_material(materials: Iterable[str]) -> bool:
    return "premium" in _materials_text(materials)


def water_resistance_tier(rating: str | None) -> int:
    text = _lowered(rating)
    for tier, markers in _WATER_RESISTANCE_TIERS:
        if any(marker in text for marker in markers):
            return tier
    return 0


def availability_rank(availability: AvailabilityV1) -> int:
    return _AVAILABILITY_RANK.get(availability, 0)


def age_in_months(launch_date: date, as_of: date) -> float:
    return (as_of - launch_date).days / DAYS_PER_MONTH
