# File: portfolio_edge/core/config.py

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, field_validator

RECORD_STORE_BACKENDS = ("sql", "memory")
BLOB_STORE_BACKENDS = ("filesystem", "memory")


class Settings(BaseModel):
    # Env-provided defaults go through the validators too
    model_config = ConfigDict(validate_default=True)

    # Basic app info
    PROJECT_NAME: str = "Portfolio Edge"
    VERSION: str = "0.1.0"

    # Page shell
    site_title: str = os.getenv("SITE_TITLE", "My Portfolio")

    # Record store (project records live under this key prefix)
    project_key_prefix: str = os.getenv("PROJECT_KEY_PREFIX", "project:")
    record_list_page_size: int = int(os.getenv("RECORD_LIST_PAGE_SIZE", "1000"))
    record_store_backend: str = os.getenv("RECORD_STORE_BACKEND", "sql")
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./portfolio.db")

    # Blob store (images)
    blob_store_backend: str = os.getenv("BLOB_STORE_BACKEND", "filesystem")
    image_root: str = os.getenv("IMAGE_ROOT", "storage/images")
    image_cache_control: str = "public, max-age=31536000"  # 1 year, immutable

    # Observability
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_format: str = os.getenv("LOG_FORMAT", "json")

    @field_validator("record_store_backend", "blob_store_backend", mode="before")
    @classmethod
    def normalize_backend(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("record_store_backend")
    @classmethod
    def check_record_backend(cls, v: str) -> str:
        if v not in RECORD_STORE_BACKENDS:
            raise ValueError(f"record_store_backend must be one of {RECORD_STORE_BACKENDS}")
        return v

    @field_validator("blob_store_backend")
    @classmethod
    def check_blob_backend(cls, v: str) -> str:
        if v not in BLOB_STORE_BACKENDS:
            raise ValueError(f"blob_store_backend must be one of {BLOB_STORE_BACKENDS}")
        return v

    @field_validator("record_list_page_size")
    @classmethod
    def check_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("record_list_page_size must be positive")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
