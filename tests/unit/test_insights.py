from modules.phone_compare.adapters.schemas import PhoneScoresV1
from modules.phone_compare.domain.insights import (
    best_for_scenarios,
    generate_insights,
    generate_recommendations,
    identify_strengths,
    identify_weaknesses,
)
from tests.unit.phone_factories import galaxy_s24_ultra, oneplus_12r, with_price


def _scores(**overrides: int) -> PhoneScoresV1:
    values = dict.fromkeys(
        ("overall", "display", "camera", "performance", "battery", "build", "value"), 60
    )
    values.update(overrides)
    return PhoneScoresV1(**values)


def test_strength_requires_more_than_five_points() -> None:
    base = _scores()
    assert identify_strengths(_scores(camera=65), base) == []
    assert identify_strengths(_scores(camera=66), base) == ["camera performance"]
    assert identify_weaknesses(base, _scores(camera=66)) == ["camera performance"]


def test_strengths_keep_category_order() -> None:
    own = _scores(value=80, display=80, battery=80)
    assert identify_strengths(own, _scores()) == [
        "display quality",
        "battery life",
        "value for money",
    ]


def test_best_for_tags_can_stack() -> None:
    own = _scores(camera=90, performance=90, battery=90, value=90, display=90)
    assert best_for_scenarios(own, _scores()) == [
        "Photography and content creation",
        "Gaming and heavy multitasking",
        "Long usage sessions and travel",
        "Budget-conscious buyers",
        "Media consumption and streaming",
    ]
    assert best_for_scenarios(_scores(build=99), _scores()) == []


def test_recommendations_price_ratio_and_score_gaps() -> None:
    phone1 = galaxy_s24_ultra()
    phone2 = oneplus_12r()
    recommendations = generate_recommendations(
        phone1, phone2, _scores(performance=71), _scores(camera=71)
    )
    assert recommendations == [
        "OnePlus 12R offers better value for money at ₹42,000",
        "Choose Samsung Galaxy S24 Ultra for better performance and gaming",
        "OnePlus 12R is better for photography enthusiasts",
    ]


def test_no_value_recommendation_at_eighty_percent() -> None:
    phone1 = with_price(galaxy_s24_ultra(), 100_000)
    phone2 = with_price(oneplus_12r(), 80_000)
    assert generate_recommendations(phone1, phone2, _scores(), _scores()) == []


def test_generate_insights_is_symmetric() -> None:
    phone1 = galaxy_s24_ultra()
    phone2 = oneplus_12r()
    scores1 = _scores(display=80)
    scores2 = _scores(value=75)
    insights = generate_insights(phone1, phone2, scores1, scores2)
    assert insights.strengths.phone1 == ("display quality",)
    assert insights.weaknesses.phone2 == ("display quality",)
    assert insights.strengths.phone2 == ("value for money",)
    assert insights.weaknesses.phone1 == ("value for money",)
    assert insights.best_for.phone1 == ("Media consumption and streaming",)
    assert insights.best_for.phone2 == ("Budget-conscious buyers",)
