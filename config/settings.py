"""
Application settings and configuration.

이 모듈은 프로젝트 전역 설정을 관리합니다.
Pydantic v2를 사용하여 타입 안전성과 환경변수 로딩을 처리합니다.
"""

from pathlib import Path
from typing import Optional
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.constants import DEFAULT_STATUS


class Settings(BaseSettings):
    """
    애플리케이션 전역 설정.

    환경변수(PUPPYBOWL_ prefix) 또는 .env 파일에서 설정을 로드합니다.
    """

    model_config = SettingsConfigDict(
        env_prefix="PUPPYBOWL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ===================
    # API Settings
    # ===================
    api_base_url: str = Field(
        default="https://fsa-puppy-bowl.herokuapp.com/api",
        description="Puppy Bowl API base URL (without cohort segment)"
    )
    cohort_name: str = Field(
        default="2306-FTB-ET-WEB-FT",
        description="Cohort path segment appended to the base URL"
    )
    request_timeout: int = Field(
        default=30,
        description="API request timeout in seconds"
    )

    # ===================
    # Form Settings
    # ===================
    default_status: str = Field(
        default=DEFAULT_STATUS,
        description="Status assigned to new players when none is entered"
    )
    show_status_field: bool = Field(
        default=True,
        description="Render a status input on the new player form"
    )

    # ===================
    # Logging
    # ===================
    log_level: str = Field(
        default="INFO",
        description="Console log level"
    )
    log_dir: Optional[Path] = Field(
        default=None,
        description="Directory for rotating log files (disabled when unset)"
    )

    @property
    def api_url(self) -> str:
        """코호트 경로가 포함된 API URL (끝에 / 포함)"""
        return f"{self.api_base_url.rstrip('/')}/{self.cohort_name.strip('/')}/"

    # ===================
    # Validation
    # ===================
    @field_validator('request_timeout')
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v < 1 or v > 120:
            raise ValueError("Request timeout must be between 1 and 120 seconds")
        return v

    @field_validator('cohort_name')
    @classmethod
    def validate_cohort(cls, v: str) -> str:
        if not v.strip('/ '):
            raise ValueError("Cohort name must not be empty")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """
    설정 싱글톤 인스턴스를 반환합니다.

    캐싱을 통해 반복 로딩을 방지합니다.
    """
    return Settings()
