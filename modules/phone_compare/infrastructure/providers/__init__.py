from modules.phone_compare.infrastructure.providers.factory import (
    PhoneCatalogRegistry,
    build_phone_catalog,
)
from modules.phone_compare.infrastructure.providers.json_file import JsonFilePhoneCatalog
from modules.phone_compare.infrastructure.providers.stubs import InMemoryPhoneCatalog

__all__ = [
    "InMemoryPhoneCatalog",
    "JsonFilePhoneCatalog",
    "PhoneCatalogRegistry",
    "build_phone_catalog",
]
