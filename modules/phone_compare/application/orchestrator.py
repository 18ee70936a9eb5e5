from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from datetime import UTC, datetime
from itertools import combinations

from modules.phone_compare.adapters.schemas import (
    ComparisonMetadataV1,
    ComparisonResultV1,
    MultiPhoneComparisonV1,
    PhonePairScoresV1,
    PhoneRankingV1,
    PhoneV1,
)
from modules.phone_compare.application.ports import PhoneCatalog
from modules.phone_compare.domain import narrative
from modules.phone_compare.domain.categories import build_categories, score_phone
from modules.phone_compare.domain.category_comparison import pick_winner
from modules.phone_compare.domain.errors import (
    CatalogUnavailableError,
    InsufficientOperandsError,
    MissingOperandError,
    PhoneNotFoundError,
    SelfComparisonError,
)
from modules.phone_compare.domain.insights import generate_insights

logger = logging.getLogger("phone_compare.orchestrator")

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ComparisonOrchestrator:
    def __init__(
        self,
        clock: Clock | None = None,
        max_workers: int = 1,
        catalog: PhoneCatalog | None = None,
    ) -> None:
        self.clock = clock or _utcnow
        self.max_workers = max_workers
        self.catalog = catalog

    def compare_phones(
        self, phone1: PhoneV1 | None, phone2: PhoneV1 | None
    ) -> ComparisonResultV1:
        return self._compare(phone1, phone2, self.clock())

    def compare_multiple_phones(
        self, phones: Sequence[PhoneV1 | None] | None
    ) -> list[ComparisonResultV1]:
        phones = list(phones or [])
        if len(phones) < 2:
            raise InsufficientOperandsError(
                "At least 2 phones are required for comparison",
                details={"count": len(phones)},
            )

        pairs = list(combinations(phones, 2))
        now = self.clock()
        logger.info("pairwise fan-out phones=%d pairs=%d", len(phones), len(pairs))

        if self.max_workers <= 1:
            return [self._compare(phone1, phone2, now) for phone1, phone2 in pairs]
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(lambda pair: self._compare(*pair, now), pairs))

    def compare_and_rank(self, phones: Sequence[PhoneV1 | None]) -> MultiPhoneComparisonV1:
        comparisons = self.compare_multiple_phones(phones)
        return MultiPhoneComparisonV1(
            comparisons=tuple(comparisons), rankings=tuple(rank_phones(comparisons))
        )

    def compare_by_ids(self, phone1_id: str, phone2_id: str) -> ComparisonResultV1:
        if self.catalog is None:
            raise CatalogUnavailableError("No phone catalog configured")
        phones = []
        for phone_id in (phone1_id, phone2_id):
            phone = self.catalog.get(phone_id)
            if phone is None:
                raise PhoneNotFoundError(
                    f"Phone not found: {phone_id}", details={"phone_id": phone_id}
                )
            phones.append(phone)
        return self.compare_phones(*phones)

    def _compare(
        self, phone1: PhoneV1 | None, phone2: PhoneV1 | None, now: datetime
    ) -> ComparisonResultV1:
        if phone1 is None or phone2 is None:
            raise MissingOperandError("Both phones are required for comparison")
        if phone1.id == phone2.id:
            raise SelfComparisonError(
                "Cannot compare a phone with itself", details={"phone_id": phone1.id}
            )

        as_of = now.date()
        scores1 = score_phone(phone1, as_of)
        scores2 = score_phone(phone2, as_of)
        categories = build_categories(phone1, phone2)
        overall_winner = pick_winner(scores1.overall, scores2.overall)
        insights = generate_insights(phone1, phone2, scores1, scores2)

        logger.info(
            "compared %s vs %s winner=%s overall=%d/%d",
            phone1.id,
            phone2.id,
            overall_winner.value,
            scores1.overall,
            scores2.overall,
        )
        return ComparisonResultV1(
            phones=(phone1, phone2),
            categories=categories,
            scores=PhonePairScoresV1(phone1=scores1, phone2=scores2),
            overall_winner=overall_winner,
            insights=insights,
            summary=narrative.comparison_summary(phone1, phone2, overall_winner, insights),
            generated_at=now,
            metadata=ComparisonMetadataV1(as_of=as_of),
        )


def rank_phones(comparisons: Sequence[ComparisonResultV1]) -> list[PhoneRankingV1]:
    overall_by_phone: dict[str, int] = {}
    for comparison in comparisons:
        for phone, scores in zip(
            comparison.phones, (comparison.scores.phone1, comparison.scores.phone2)
        ):
            overall_by_phone.setdefault(phone.id, scores.overall)

    ordered = sorted(overall_by_phone.items(), key=lambda item: -item[1])
    return [
        PhoneRankingV1(phone_id=phone_id, rank=index, total_score=total)
        for index, (phone_id, total) in enumerate(ordered, start=1)
    ]

