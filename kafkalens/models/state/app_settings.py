"""Connection settings model and configuration errors."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kafkalens.constants.defaults import (
    AWS_REGION_DEFAULT,
    IAM_AUTH_DEFAULT,
    TIMEOUT_MS_DEFAULT,
)


class ConnectionSettings(BaseModel):
    """Read-only connection configuration shared by every gateway call."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bootstrap_servers: list[str]
    iam_auth: bool = IAM_AUTH_DEFAULT
    # Only used to sign IAM tokens.
    aws_region: str = AWS_REGION_DEFAULT
    timeout_ms: int = Field(default=TIMEOUT_MS_DEFAULT, gt=0)

    @field_validator("bootstrap_servers", mode="before")
    @classmethod
    def _split_bootstrap_servers(cls, value: object) -> object:
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value

    @field_validator("bootstrap_servers")
    @classmethod
    def _require_bootstrap_servers(cls, value: list[str]) -> list[str]:
        servers = [server.strip() for server in value if server.strip()]
        if not servers:
            raise ValueError("at least one bootstrap server is required")
        return servers

    @property
    def bootstrap(self) -> str:
        """Comma separated bootstrap list as librdkafka expects it."""
        return ",".join(self.bootstrap_servers)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""
