import uuid
from datetime import date, datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

_FROZEN = {"extra": "forbid", "frozen": True}


class AvailabilityV1(str, Enum):
    available = "available"
    discontinued = "discontinued"
    upcoming = "upcoming"


class ComparisonWinnerV1(str, Enum):
    phone1 = "phone1"
    phone2 = "phone2"
    tie = "tie"


class ImportanceV1(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"


class CategoryNameV1(str, Enum):
    display = "display"
    camera = "camera"
    performance = "performance"
    battery = "battery"
    build = "build"
    value = "value"


class CameraSpecV1(BaseModel):
    megapixels: float
    aperture: str | None = None
    features: tuple[str, ...] = ()
    video_recording: str | None = None

    model_config = _FROZEN


class DisplaySpecV1(BaseModel):
    size: str
    resolution: str
    type: str
    refresh_rate: int | None = None
    brightness: int | None = None

    model_config = _FROZEN


class CameraSystemV1(BaseModel):
    rear: tuple[CameraSpecV1, ...] = ()
    front: CameraSpecV1
    features: tuple[str, ...] = ()

    model_config = _FROZEN


class PerformanceSpecV1(BaseModel):
    processor: str
    gpu: str | None = None
    ram: tuple[str, ...] = ()
    storage: tuple[str, ...] = ()
    expandable_storage: bool | None = None

    model_config = _FROZEN


class BatterySpecV1(BaseModel):
    capacity: int
    charging_speed: float | None = None
    wireless_charging: bool | None = None

    model_config = _FROZEN


class ConnectivitySpecV1(BaseModel):
    network: tuple[str, ...] = ()
    wifi: str = ""
    bluetooth: str = ""
    nfc: bool | None = None

    model_config = _FROZEN


class BuildSpecV1(BaseModel):
    dimensions: str = ""
    weight: str = ""
    materials: tuple[str, ...] = ()
    colors: tuple[str, ...] = ()
    water_resistance: str | None = None

    model_config = _FROZEN


class SoftwareSpecV1(BaseModel):
    os: str
    version: str = ""
    update_support: str | None = None

    model_config = _FROZEN


class PhoneSpecificationsV1(BaseModel):
    display: DisplaySpecV1
    camera: CameraSystemV1
    performance: PerformanceSpecV1
    battery: BatterySpecV1
    connectivity: ConnectivitySpecV1 = Field(default_factory=ConnectivitySpecV1)
    build: BuildSpecV1 = Field(default_factory=BuildSpecV1)
    software: SoftwareSpecV1

    model_config = _FROZEN


class PhonePricingV1(BaseModel):
    mrp: float
    current_price: float
    currency: Literal["INR"] = "INR"

    model_config = _FROZEN


class PhoneV1(BaseModel):
    id: str
    brand: str
    model: str
    variant: str | None = None
    launch_date: date
    availability: AvailabilityV1
    pricing: PhonePricingV1
    specifications: PhoneSpecificationsV1
    images: tuple[str, ...] = ()

    model_config = _FROZEN

    @property
    def display_name(self) -> str:
        return f"{self.brand} {self.model}"


class PhoneScoresV1(BaseModel):
    overall: int = Field(ge=0, le=100)
    display: int = Field(ge=0, le=100)
    camera: int = Field(ge=0, le=100)
    performance: int = Field(ge=0, le=100)
    battery: int = Field(ge=0, le=100)
    build: int = Field(ge=0, le=100)
    value: int = Field(ge=0, le=100)

    model_config = _FROZEN

    def for_category(self, category: CategoryNameV1) -> int:
        return getattr(self, category.value)


class SpecComparisonV1(BaseModel):
    category: str
    phone1_value: str
    phone2_value: str
    winner: ComparisonWinnerV1
    difference: str | None = None
    importance: ImportanceV1 = ImportanceV1.medium

    model_config = _FROZEN


class ComparisonCategoryV1(BaseModel):
    name: CategoryNameV1
    display_name: str
    weight: float = Field(ge=0, le=1)
    comparisons: tuple[SpecComparisonV1, ...]
    winner: ComparisonWinnerV1
    summary: str

    model_config = _FROZEN


class PerPhoneListV1(BaseModel):
    phone1: tuple[str, ...] = ()
    phone2: tuple[str, ...] = ()

    model_config = _FROZEN


class ComparisonInsightsV1(BaseModel):
    strengths: PerPhoneListV1
    weaknesses: PerPhoneListV1
    recommendations: tuple[str, ...] = ()
    best_for: PerPhoneListV1

    model_config = _FROZEN


class PhonePairScoresV1(BaseModel):
    phone1: PhoneScoresV1
    phone2: PhoneScoresV1

    model_config = _FROZEN


class ComparisonMetadataV1(BaseModel):
    as_of: date

    model_config = _FROZEN


class ComparisonResultV1(BaseModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    phones: tuple[PhoneV1, PhoneV1]
    categories: tuple[ComparisonCategoryV1, ...]
    scores: PhonePairScoresV1
    overall_winner: ComparisonWinnerV1
    insights: ComparisonInsightsV1
    summary: str
    generated_at: datetime
    metadata: ComparisonMetadataV1

    model_config = _FROZEN


class PhoneRankingV1(BaseModel):
    phone_id: str
    rank: int
    total_score: int

    model_config = _FROZEN


class MultiPhoneComparisonV1(BaseModel):
    comparisons: tuple[ComparisonResultV1, ...]
    rankings: tuple[PhoneRankingV1, ...] = ()

    model_config = _FROZEN


class PairComparisonRequestV1(BaseModel):
    phone1: PhoneV1 | None = None
    phone2: PhoneV1 | None = None

    model_config = {"extra": "forbid"}


class MultiComparisonRequestV1(BaseModel):
    phones: list[PhoneV1] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


class ComparisonByIdRequestV1(BaseModel):
    phone1_id: str
    phone2_id: str

    model_config = {"extra": "forbid"}
