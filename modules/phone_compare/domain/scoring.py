from __future__ import annotations

from datetime import date

from modules.phone_compare.adapters.schemas import AvailabilityV1, PhoneV1
from modules.phone_compare.domain.normalization import (
    age_in_months,
    extract_number,
    has_premium_material,
    materials_tier,
    max_option,
    panel_tier,
    processor_tier,
    resolution_tier,
    water_resistance_tier,
)

# Each table is (threshold, bonus), checked highest threshold first.
_SIZE_BONUS = ((6.5, 15), (6.0, 10), (5.5, 5))
_RESOLUTION_BONUS = {4: 20, 3: 15, 2: 5}
_PANEL_BONUS = {3: 10, 2: 5}
_REFRESH_BONUS = ((120, 5), (90, 3))

_MAIN_CAMERA_BONUS = ((108, 20), (64, 15), (48, 10), (12, 5))
_FRONT_CAMERA_BONUS = ((32, 10), (16, 7), (8, 5))
_CAMERA_COUNT_BONUS = ((4, 10), (3, 7), (2, 5))

_PROCESSOR_BONUS = {5: 25, 4: 20, 3: 15, 2: 10}
_RAM_BONUS = ((12, 15), (8, 10), (6, 7), (4, 5))
_STORAGE_BONUS = ((512, 10), (256, 7), (128, 5))

_CAPACITY_BONUS = ((5000, 25), (4500, 20), (4000, 15), (3500, 10), (3000, 5))
_CHARGING_BONUS = ((100, 15), (65, 12), (33, 8), (18, 5))

_MATERIALS_BONUS = {3: 20, 2: 15}
_WATER_RESISTANCE_BONUS = {4: 15, 3: 12, 2: 8}

_PRICE_BONUS = ((15_000, 20), (30_000, 15), (50_000, 10))
_AVAILABILITY_BONUS = {AvailabilityV1.available: 20, AvailabilityV1.upcoming: 10}


def clamp_score(value: float) -> int:
    return int(max(0, min(100, value)))


def _step_bonus(value: float | None, steps: tuple[tuple[float, int], ...]) -> int:
    if not value:
        return 0
    for threshold, bonus in steps:
        if value >= threshold:
            return bonus
    return 0


def score_display(phone: PhoneV1, as_of: date) -> int:
    display = phone.specifications.display
    score = 50
    score += _step_bonus(extract_number(display.size), _SIZE_BONUS)
    score += _RESOLUTION_BONUS.get(resolution_tier(display.resolution), 0)
    score += _PANEL_BONUS.get(panel_tier(display.type), 0)
    score += _step_bonus(display.refresh_rate, _REFRESH_BONUS)
    return score


def score_camera(phone: PhoneV1, as_of: date) -> int:
    camera = phone.specifications.camera
    score = 40
    if camera.rear:
        score += _step_bonus(camera.rear[0].megapixels, _MAIN_CAMERA_BONUS)
    score += _step_bonus(camera.front.megapixels, _FRONT_CAMERA_BONUS)
    score += _step_bonus(len(camera.rear), _CAMERA_COUNT_BONUS)
    score += min(10, 2 * len(camera.features))
    return score


def score_performance(phone: PhoneV1, as_of: date) -> int:
    performance = phone.specifications.performance
    score = 40
    score += _PROCESSOR_BONUS.get(processor_tier(performance.processor), 0)
    score += _step_bonus(max_option(performance.ram), _RAM_BONUS)
    score += _step_bonus(max_option(performance.storage), _STORAGE_BONUS)
    return score


def score_battery(phone: PhoneV1, as_of: date) -> int:
    battery = phone.specifications.battery
    score = 40
    score += _step_bonus(battery.capacity, _CAPACITY_BONUS)
    score += _step_bonus(battery.charging_speed, _CHARGING_BONUS)
    if battery.wireless_charging:
        score += 10
    return score


def score_build(phone: PhoneV1, as_of: date) -> int:
    build = phone.specifications.build
    score = 50
    tier = materials_tier(build.materials)
    if tier in _MATERIALS_BONUS:
        score += _MATERIALS_BONUS[tier]
    elif has_premium_material(build.materials):
        score += 10
    score += _WATER_RESISTANCE_BONUS.get(water_resistance_tier(build.water_resistance), 0)
    score += min(15, 2 * len(build.colors))
    return score


def score_value(phone: PhoneV1, as_of: date) -> int:
    score = 50

    price = phone.pricing.current_price
    for ceiling, bonus in _PRICE_BONUS:
        if price < ceiling:
            score += bonus
            break
    else:
        score += 5

    score += _AVAILABILITY_BONUS.get(phone.availability, -10)

    months_old = age_in_months(phone.launch_date, as_of)
    if months_old < 6:
        score += 10
    elif months_old < 12:
        score += 5
    elif months_old > 24:
        score -= 5
    return score
