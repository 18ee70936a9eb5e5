from __future__ import annotations

from abc import ABC, abstractmethod

from modules.phone_compare.adapters.schemas import PhoneV1


class PhoneCatalog(ABC):
    @abstractmethod
    def get(self, phone_id: str) -> PhoneV1 | None:
        raise NotImplementedError
