from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Builder settings loaded from environment variables."""

    # ------------------------------------------------------------------
    # Credential references
    # ------------------------------------------------------------------
    # "warn": an action credential missing from an explicitly supplied
    #         workflow credential set is logged and the workflow is built
    # "fail": the same situation aborts WorkflowBuilder.build()
    undeclared_credential_policy: Literal["warn", "fail"] = "warn"

    # ------------------------------------------------------------------
    # Retry policies
    # ------------------------------------------------------------------
    # Tags accepted by ActionBuilder.with_retry_policy()
    retry_policies: list[str] = ["periodic", "exponential"]

    class Config:
        env_prefix = "FLUENTJOB_"
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
