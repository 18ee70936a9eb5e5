from modules.phone_compare.adapters.schemas.v1 import (
    AvailabilityV1,
    BatterySpecV1,
    BuildSpecV1,
    CameraSpecV1,
    CameraSystemV1,
    CategoryNameV1,
    ComparisonByIdRequestV1,
    ComparisonCategoryV1,
    ComparisonInsightsV1,
    ComparisonMetadataV1,
    ComparisonResultV1,
    ComparisonWinnerV1,
    ConnectivitySpecV1,
    DisplaySpecV1,
    ImportanceV1,
    MultiComparisonRequestV1,
    MultiPhoneComparisonV1,
    PairComparisonRequestV1,
    PerformanceSpecV1,
    PerPhoneListV1,
    PhonePairScoresV1,
    PhonePricingV1,
    PhoneRankingV1,
    PhoneScoresV1,
    PhoneSpecificationsV1,
    PhoneV1,
    SoftwareSpecV1,
    SpecComparisonV1,
)
from modules.phone_compare.adapters.schemas.visual_v1 import (
    CategoryBreakdownPointV1,
    PhoneCardPairV1,
    PhoneCardV1,
    VisualCategoryV1,
    VisualChartsV1,
    VisualComparisonV1,
    VisualSpecRowV1,
    VisualSummaryV1,
)

__all__ = [
    "AvailabilityV1",
    "BatterySpecV1",
    "BuildSpecV1",
    "CameraSpecV1",
    "CameraSystemV1",
    "CategoryNameV1",
    "CategoryBreakdownPointV1",
    "ComparisonByIdRequestV1",
    "ComparisonCategoryV1",
    "ComparisonInsightsV1",
    "ComparisonMetadataV1",
    "ComparisonResultV1",
    "ComparisonWinnerV1",
    "ConnectivitySpecV1",
    "DisplaySpecV1",
    "ImportanceV1",
    "MultiComparisonRequestV1",
    "MultiPhoneComparisonV1",
    "PairComparisonRequestV1",
    "PerformanceSpecV1",
    "PerPhoneListV1",
    "PhoneCardPairV1",
    "PhoneCardV1",
    "PhonePairScoresV1",
    "PhonePricingV1",
    "PhoneRankingV1",
    "PhoneScoresV1",
    "PhoneSpecificationsV1",
    "PhoneV1",
    "SoftwareSpecV1",
    "SpecComparisonV1",
    "VisualCategoryV1",
    "VisualChartsV1",
    "VisualComparisonV1",
    "VisualSpecRowV1",
    "VisualSummaryV1",
]
