import logging
import os
from typing import Optional

from dotenv import dotenv_values
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic_core import PydanticCustomError


class Settings(BaseModel):
    """Settings model for environment variables with validation and defaults."""

    # Server
    host: str = Field(default="0.0.0.0", description="Interface to bind to")
    port: int = Field(default=8080, description="Port to listen on")

    # Sessions
    secret_key: str = Field(
        default="dev-secret-key-change-in-production",
        description="Secret key for session signing",
    )
    session_lifetime_days: int = Field(
        default=30, description="Days before an idle session expires"
    )

    # Error reporting
    sentry_dsn: Optional[str] = Field(default=None, description="Sentry DSN")

    # Internal
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate the log level names a standard logging level."""
        if not isinstance(getattr(logging, v.upper(), None), int):
            raise PydanticCustomError(
                "invalid_log_level",
                "Log level must be one of DEBUG, INFO, WARNING, ERROR or CRITICAL",
            )
        return v.upper()

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v):
        """Validate a secret key is set, sessions cannot be signed without it."""
        if not v:
            raise PydanticCustomError(
                "missing_secret_key", "A secret key is required to sign sessions"
            )
        return v

    @field_validator("session_lifetime_days")
    @classmethod
    def validate_session_lifetime(cls, v):
        if v < 1:
            raise PydanticCustomError(
                "invalid_session_lifetime",
                "Session lifetime must be at least one day",
            )
        return v

    @classmethod
    def from_env_file(cls, env_path: str = ".env", validate: bool = True) -> "Settings":
        """Load settings from .env file if it exists.

        Args:
            env_path: Path to .env file
            validate: Whether to validate the settings
        """
        if not os.path.exists(env_path):
            if not validate:
                return cls.model_construct()
            raise FileNotFoundError(f".env file not found at {env_path}")

        env_values = dotenv_values(env_path)

        settings_dict = {}
        for field_name, field_info in cls.model_fields.items():
            env_value = env_values.get(field_name.upper())
            if env_value is not None:
                # Convert to appropriate type
                if field_info.annotation is int:
                    settings_dict[field_name] = int(env_value)
                elif field_info.annotation is bool:
                    settings_dict[field_name] = env_value.lower() in (
                        "true",
                        "1",
                        "yes",
                        "on",
                    )
                else:
                    settings_dict[field_name] = env_value

        # Use model_construct to bypass validation if requested
        if not validate:
            return cls.model_construct(**settings_dict)

        return cls(**settings_dict)
