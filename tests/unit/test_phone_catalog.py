import json

import pytest

from modules.phone_compare.application.settings import PhoneCompareSettings
from modules.phone_compare.infrastructure.providers import (
    InMemoryPhoneCatalog,
    JsonFilePhoneCatalog,
    PhoneCatalogRegistry,
    build_phone_catalog,
)
from tests.unit.phone_factories import galaxy_s24_ultra, oneplus_12r


def test_json_catalog_loads_records(tmp_path) -> None:
    path = tmp_path / "phones.json"
    phones = [galaxy_s24_ultra(), oneplus_12r()]
    path.write_text(json.dumps([p.model_dump(mode="json") for p in phones]), encoding="utf-8")

    catalog = JsonFilePhoneCatalog(path)
    assert catalog.get("phone-2") == phones[1]
    assert catalog.get("unknown") is None


def test_factory_returns_expected_types(tmp_path) -> None:
    path = tmp_path / "phones.json"
    path.write_text("[]", encoding="utf-8")

    memory = build_phone_catalog(PhoneCompareSettings(catalog_provider="memory"))
    assert isinstance(memory, InMemoryPhoneCatalog)
    json_catalog = build_phone_catalog(
        PhoneCompareSettings(catalog_provider="json", catalog_path=str(path))
    )
    assert isinstance(json_catalog, JsonFilePhoneCatalog)


def test_factory_rejects_bad_configuration() -> None:
    with pytest.raises(ValueError, match="CATALOG_PATH"):
        build_phone_catalog(PhoneCompareSettings(catalog_provider="json"))
    with pytest.raises(ValueError, match="unsupported"):
        build_phone_catalog(PhoneCompareSettings(catalog_provider="postgres"))


def test_registry_reuses_catalog_per_configuration(tmp_path) -> None:
    path = tmp_path / "phones.json"
    path.write_text("[]", encoding="utf-8")
    memory = PhoneCompareSettings(catalog_provider="memory")
    json_settings = PhoneCompareSettings(catalog_provider="json", catalog_path=str(path))

    PhoneCatalogRegistry.reset()
    try:
        first = PhoneCatalogRegistry.get_catalog(memory)
        assert PhoneCatalogRegistry.get_catalog(memory) is first

        switched = PhoneCatalogRegistry.get_catalog(json_settings)
        assert isinstance(switched, JsonFilePhoneCatalog)
        assert PhoneCatalogRegistry.get_catalog(json_settings) is switched
    finally:
        PhoneCatalogRegistry.reset()


def test_registry_does_not_cache_failures() -> None:
    PhoneCatalogRegistry.reset()
    try:
        with pytest.raises(ValueError):
            PhoneCatalogRegistry.get_catalog(PhoneCompareSettings(catalog_provider="json"))
        memory = PhoneCatalogRegistry.get_catalog(PhoneCompareSettings(catalog_provider="memory"))
        assert isinstance(memory, InMemoryPhoneCatalog)
    finally:
        PhoneCatalogRegistry.reset()
