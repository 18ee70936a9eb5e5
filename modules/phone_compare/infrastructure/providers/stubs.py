from __future__ import annotations

from collections.abc import Iterable

from modules.phone_compare.adapters.schemas import PhoneV1
from modules.phone_compare.application.ports import PhoneCatalog


class InMemoryPhoneCatalog(PhoneCatalog):
    def __init__(self, phones: Iterable[PhoneV1] = ()) -> None:
        self._phones = {phone.id: phone for phone in phones}

    def get(self, phone_id: str) -> PhoneV1 | None:
        return self._phones.get(phone_id)
