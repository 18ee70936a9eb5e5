from __future__ import annotations

import threading

from modules.phone_compare.application.ports import PhoneCatalog
from modules.phone_compare.application.settings import (
    PhoneCompareSettings,
    get_phone_compare_settings,
)
from modules.phone_compare.infrastructure.providers.json_file import JsonFilePhoneCatalog
from modules.phone_compare.infrastructure.providers.stubs import InMemoryPhoneCatalog


def build_phone_catalog(settings: PhoneCompareSettings | None = None) -> PhoneCatalog:
    settings = settings or get_phone_compare_settings()
    provider_name = settings.catalog_provider.lower()
    if provider_name == "memory":
        return InMemoryPhoneCatalog()
    if provider_name == "json":
        if not settings.catalog_path:
            raise ValueError("PHONE_COMPARE_CATALOG_PATH is required for the json catalog")
        return JsonFilePhoneCatalog(settings.catalog_path)
    raise ValueError(f"unsupported phone catalog provider: {settings.catalog_provider}")


class PhoneCatalogRegistry:
    """Keeps one catalog per provider configuration so files are loaded once."""

    _catalog: PhoneCatalog | None = None
    _signature: tuple | None = None
    _lock = threading.Lock()

    @classmethod
    def get_catalog(cls, settings: PhoneCompareSettings) -> PhoneCatalog:
        signature = (settings.catalog_provider.lower(), settings.catalog_path)
        with cls._lock:
            if cls._catalog is None or cls._signature != signature:
                cls._catalog = build_phone_catalog(settings)
                cls._signature = signature
            return cls._catalog

    @classmethod
    def reset(cls) -> None:
        with cls._lock:
            cls._catalog = None
            cls._signature = None
