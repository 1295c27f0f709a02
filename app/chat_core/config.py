"""
Configuration management using Pydantic Settings.
Every field is optional; the API key may also be typed into the sidebar.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import LLMSettings


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(extra="ignore")

    gemini_api_key: Optional[str] = Field(default=None, description="Gemini API key")
    gemini_model: str = Field(default="gemini-2.0-flash", description="Model name")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="REST base URL, without the /models suffix",
    )
    request_timeout: Optional[float] = Field(
        default=30.0, description="Seconds before a request fails; empty disables"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("gemini_api_key", "request_timeout", mode="before")
    @classmethod
    def blank_as_none(cls, v):
        """Treat KEY= in .env the same as an unset variable"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.strip().upper()

    def llm_settings(self) -> LLMSettings:
        return LLMSettings(
            model=self.gemini_model,
            base_url=self.gemini_base_url,
            timeout=self.request_timeout,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    return Settings()
