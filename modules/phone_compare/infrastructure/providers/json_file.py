from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter

from modules.phone_compare.adapters.schemas import PhoneV1
from modules.phone_compare.infrastructure.providers.stubs import InMemoryPhoneCatalog

logger = logging.getLogger("phone_compare.catalog")

_PHONE_LIST = TypeAdapter(list[PhoneV1])


class JsonFilePhoneCatalog(InMemoryPhoneCatalog):
    """Catalog backed by a JSON array of phone records, read once on init."""

    def __init__(self, path: str | Path) -> None:
        path = Path(path)
        phones = _PHONE_LIST.validate_json(path.read_bytes())
        logger.info("loaded %d phones from %s", len(phones), path)
        super().__init__(phones)
