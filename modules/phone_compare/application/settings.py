from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PhoneCompareSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    max_phones: int = Field(default=5, ge=2, alias="PHONE_COMPARE_MAX_PHONES")
    multi_workers: int = Field(default=1, ge=1, alias="PHONE_COMPARE_MULTI_WORKERS")
    catalog_provider: str = Field(default="memory", alias="PHONE_COMPARE_CATALOG_PROVIDER")
    catalog_path: str | None = Field(default=None, alias="PHONE_COMPARE_CATALOG_PATH")


def get_phone_compare_settings() -> PhoneCompareSettings:
    return PhoneCompareSettings()
