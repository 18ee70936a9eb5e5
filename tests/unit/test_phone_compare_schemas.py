import pytest
from pydantic import ValidationError

from modules.phone_compare.adapters.schemas import (
    ComparisonResultV1,
    PhonePricingV1,
    PhoneScoresV1,
    PhoneV1,
)
from modules.phone_compare.application.orchestrator import ComparisonOrchestrator
from tests.unit.phone_factories import fixed_clock, galaxy_s24_ultra, oneplus_12r


def test_phone_round_trips_through_json() -> None:
    phone = galaxy_s24_ultra()
    restored = PhoneV1.model_validate_json(phone.model_dump_json())
    assert restored == phone
    assert restored.display_name == "Samsung Galaxy S24 Ultra"


def test_phone_is_frozen() -> None:
    phone = galaxy_s24_ultra()
    with pytest.raises(ValidationError):
        phone.brand = "Other"


def test_pricing_currency_is_fixed() -> None:
    assert PhonePricingV1(mrp=1, current_price=1).currency == "INR"
    with pytest.raises(ValidationError):
        PhonePricingV1(mrp=1, current_price=1, currency="USD")


def test_scores_reject_out_of_range() -> None:
    with pytest.raises(ValidationError):
        PhoneScoresV1(
            overall=101, display=0, camera=0, performance=0, battery=0, build=0, value=0
        )


def test_result_serializes_for_transport() -> None:
    result = ComparisonOrchestrator(clock=fixed_clock).compare_phones(
        galaxy_s24_ultra(), oneplus_12r()
    )
    dumped = result.model_dump(mode="json")
    assert dumped["overall_winner"] == "phone1"
    assert dumped["categories"][0]["comparisons"][0]["importance"] == "high"
    assert ComparisonResultV1.model_validate(dumped) == result


def test_result_collections_are_immutable() -> None:
    result = ComparisonOrchestrator(clock=fixed_clock).compare_phones(
        galaxy_s24_ultra(), oneplus_12r()
    )
    assert isinstance(result.categories, tuple)
    assert isinstance(result.categories[0].comparisons, tuple)
    assert isinstance(result.insights.strengths.phone1, tuple)
    assert isinstance(result.insights.recommendations, tuple)
    assert isinstance(result.phones[0].images, tuple)

    with pytest.raises(AttributeError):
        result.categories.clear()
    with pytest.raises(AttributeError):
        result.insights.strengths.phone1.append("forged")
    with pytest.raises(ValidationError):
        result.metadata.as_of = None
