from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Recipe Personalizer"
    app_env: str = "development"
    debug: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:8080",
    ]

    # Catalog (미설정 시 내장 데모 카탈로그 사용)
    catalog_path: Optional[str] = None

    # Personalization
    default_inclusive_mode: bool = True

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            import json

            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("catalog_path", mode="before")
    @classmethod
    def empty_catalog_path_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """프로덕션 환경 설정 검증"""
        if not self.is_production:
            return self

        if self.debug:
            raise ValueError(
                "Production requires DEBUG=false. "
                "Set it via environment variable."
            )

        # 내장 카탈로그는 데모 데이터이므로 프로덕션에서는 파일 필수
        if self.catalog_path is None:
            raise ValueError(
                "Production requires CATALOG_PATH. "
                "The built-in catalog is demo data only."
            )

        return self

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """설정 인스턴스를 반환 (캐싱됨)"""
    return Settings()


settings = get_settings()
