from datetime import UTC, date, datetime

from modules.phone_compare.adapters.schemas import (
    AvailabilityV1,
    BatterySpecV1,
    BuildSpecV1,
    CameraSpecV1,
    CameraSystemV1,
    ConnectivitySpecV1,
    DisplaySpecV1,
    PerformanceSpecV1,
    PhonePricingV1,
    PhoneSpecificationsV1,
    PhoneV1,
    SoftwareSpecV1,
)

AS_OF = date(2025, 1, 15)


def fixed_clock() -> datetime:
    return datetime(2025, 1, 15, 12, 0, tzinfo=UTC)


def galaxy_s24_ultra() -> PhoneV1:
    return PhoneV1(
        id="phone-1",
        brand="Samsung",
        model="Galaxy S24 Ultra",
        variant="256GB",
        launch_date=date(2024, 1, 1),
        availability=AvailabilityV1.available,
        pricing=PhonePricingV1(mrp=130000, current_price=125000),
        specifications=PhoneSpecificationsV1(
            display=DisplaySpecV1(
                size='6.8"',
                resolution="1440x3120",
                type="Dynamic AMOLED",
                refresh_rate=120,
                brightness=1750,
            ),
            camera=CameraSystemV1(
                rear=[
                    CameraSpecV1(megapixels=200, aperture="1.7", features=["OIS", "Laser AF"]),
                    CameraSpecV1(megapixels=50, aperture="2.2", features=["Ultra-wide"]),
                    CameraSpecV1(megapixels=10, aperture="2.4", features=["Telephoto"]),
                    CameraSpecV1(megapixels=10, aperture="4.9", features=["Periscope"]),
                ],
                front=CameraSpecV1(megapixels=12, aperture="2.2"),
                features=["Night Mode", "Pro Mode", "Portrait Mode", "Super Steady"],
            ),
            performance=PerformanceSpecV1(
                processor="Snapdragon 8 Gen 3",
                gpu="Adreno 750",
                ram=["12GB", "16GB"],
                storage=["256GB", "512GB", "1024GB"],
                expandable_storage=False,
            ),
            battery=BatterySpecV1(capacity=5000, charging_speed=45, wireless_charging=True),
            connectivity=ConnectivitySpecV1(
                network=["5G", "4G LTE"], wifi="Wi-Fi 7", bluetooth="5.3", nfc=True
            ),
            build=BuildSpecV1(
                dimensions="162.3 x 79.0 x 8.6 mm",
                weight="232g",
                materials=["Gorilla Glass Victus 2", "Titanium Frame"],
                colors=["Titanium Black", "Titanium Gray", "Titanium Violet", "Titanium Yellow"],
                water_resistance="IP68",
            ),
            software=SoftwareSpecV1(os="Android", version="14", update_support="7 years"),
        ),
        images=["s24-front.jpg", "s24-back.jpg"],
    )


def oneplus_12r() -> PhoneV1:
    return PhoneV1(
        id="phone-2",
        brand="OnePlus",
        model="12R",
        variant="128GB",
        launch_date=date(2024, 2, 1),
        availability=AvailabilityV1.available,
        pricing=PhonePricingV1(mrp=45000, current_price=42000),
        specifications=PhoneSpecificationsV1(
            display=DisplaySpecV1(
                size='6.78"',
                resolution="1264x2780",
                type="LTPO4 AMOLED",
                refresh_rate=120,
                brightness=4500,
            ),
            camera=CameraSystemV1(
                rear=[
                    CameraSpecV1(megapixels=50, aperture="1.8", features=["OIS"]),
                    CameraSpecV1(megapixels=8, aperture="2.2", features=["Ultra-wide"]),
                    CameraSpecV1(megapixels=2, aperture="2.4", features=["Macro"]),
                ],
                front=CameraSpecV1(megapixels=16, aperture="2.4"),
                features=["Night Mode", "Portrait Mode"],
            ),
            performance=PerformanceSpecV1(
                processor="Snapdragon 8 Gen 2",
                gpu="Adreno 740",
                ram=["8GB", "16GB"],
                storage=["128GB", "256GB"],
            ),
            battery=BatterySpecV1(capacity=5400, charging_speed=100, wireless_charging=False),
            build=BuildSpecV1(
                materials=["Gorilla Glass Victus 2", "Aluminum Frame"],
                colors=["Cool Blue", "Iron Gray"],
                water_resistance="IP64",
            ),
            software=SoftwareSpecV1(os="Android", version="14"),
        ),
        images=["12r.jpg"],
    )


def minimal_phone(phone_id: str = "bare") -> PhoneV1:
    return PhoneV1(
        id=phone_id,
        brand="Generic",
        model="Basic",
        launch_date=date(2020, 1, 1),
        availability=AvailabilityV1.discontinued,
        pricing=PhonePricingV1(mrp=0, current_price=0),
        specifications=PhoneSpecificationsV1(
            display=DisplaySpecV1(size="", resolution="", type=""),
            camera=CameraSystemV1(front=CameraSpecV1(megapixels=0)),
            performance=PerformanceSpecV1(processor="Unknown"),
            battery=BatterySpecV1(capacity=0),
            software=SoftwareSpecV1(os="Android"),
        ),
    )


def clone(phone: PhoneV1, phone_id: str) -> PhoneV1:
    return phone.model_copy(update={"id": phone_id})


def with_section(phone: PhoneV1, section: str, **changes) -> PhoneV1:
    specs = phone.specifications
    current = getattr(specs, section)
    updated = type(current).model_validate({**current.model_dump(), **changes})
    return phone.model_copy(
        update={"specifications": specs.model_copy(update={section: updated})}
    )


def with_price(phone: PhoneV1, current_price: float) -> PhoneV1:
    pricing = phone.pricing.model_copy(update={"current_price": current_price})
    return phone.model_copy(update={"pricing": pricing})
