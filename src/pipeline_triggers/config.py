"""Configuration for pipeline trigger resolution.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)

Build information enrichment is off unless a build service base URL is set.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderFailurePolicy(str, Enum):
    """What a batch of match attempts does when a build lookup fails."""

    PROPAGATE = "propagate"
    SKIP_PIPELINE = "skip_pipeline"


class TriggerSettings(BaseSettings):
    """Settings for trigger resolution.

    Environment variables:
    - LOG_LEVEL                                        (optional)
    - PIPELINE_TRIGGERS_BUILD_SERVICE_BASE_URL         (optional)
    - PIPELINE_TRIGGERS_BUILD_SERVICE_TOKEN            (optional)
    - PIPELINE_TRIGGERS_BUILD_SERVICE_TIMEOUT_SECONDS  (optional)
    - PIPELINE_TRIGGERS_PROVIDER_FAILURE_POLICY        (optional)
    - PIPELINE_TRIGGERS_MAX_WORKERS                    (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `TriggerSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    build_service_base_url: str = Field(
        default="",
        validation_alias="PIPELINE_TRIGGERS_BUILD_SERVICE_BASE_URL",
        description="Base URL of the build information service; empty disables enrichment",
    )
    build_service_token: str = Field(
        default="",
        validation_alias="PIPELINE_TRIGGERS_BUILD_SERVICE_TOKEN",
        description="Optional bearer token for the build information service",
    )
    build_service_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias="PIPELINE_TRIGGERS_BUILD_SERVICE_TIMEOUT_SECONDS",
        description="Per-request timeout for build information lookups",
    )

    provider_failure_policy: ProviderFailurePolicy = Field(
        default=ProviderFailurePolicy.PROPAGATE,
        validation_alias="PIPELINE_TRIGGERS_PROVIDER_FAILURE_POLICY",
        description=(
            "'propagate' aborts the whole batch when a build lookup fails; "
            "'skip_pipeline' logs the failure and drops only that match attempt."
        ),
    )
    max_workers: int = Field(
        default=1,
        ge=1,
        validation_alias="PIPELINE_TRIGGERS_MAX_WORKERS",
        description=(
            "Number of threads used to evaluate candidate pipelines. "
            "All threads share one requests.Session for build lookups, "
            "and requests does not guarantee Session thread-safety."
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("build_service_base_url")
    @classmethod
    def _normalize_base_url(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if value and not value.startswith(("http://", "https://")):
            raise ValueError("Build service base URL must start with http:// or https://")
        return value

    @property
    def build_info_enabled(self) -> bool:
        """Whether triggers are enriched with build information."""

        return bool(self.build_service_base_url)
