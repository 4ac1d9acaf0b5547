"""Application configuration and settings management."""

from typing import Annotated, Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TRIPOPT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Trip Options"
    default_sort_order: Literal["min", "avg", "max"] = Field(
        default="avg",
        description="Stats field used to rank options when the caller does not pick one.",
    )
    max_options: int = Field(default=10, ge=1)
    fare_currency: str = Field(default="USD", min_length=3, max_length=3)
    default_fare: float = Field(default=2.0, ge=0.0, description="Fare charged for modes missing from mode_fares.")
    mode_fares: Annotated[dict[str, float], NoDecode] = Field(
        default={"BUS": 1.75, "SUBWAY": 2.25, "RAIL": 4.0, "TRAM": 1.75, "FERRY": 3.0},
        description="Base fare per transit mode.",
    )
    peak_multiplier: float = Field(default=1.25, ge=0.0)
    senior_multiplier: float = Field(default=0.5, ge=0.0)

    @field_validator("default_sort_order", mode="before")
    @classmethod
    def _lower_sort_order(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("fare_currency", mode="after")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.upper()

    @field_validator("mode_fares", mode="before")
    @classmethod
    def _parse_mode_fares_from_env(cls, value: Any) -> dict[str, float]:
        """Parse mode prices from a mapping, a JSON object or ``MODE=price`` pairs."""
        if isinstance(value, dict):
            return {str(mode).upper(): float(price) for mode, price in value.items()}
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, dict):
                    return {str(mode).upper(): float(price) for mode, price in parsed.items()}
            except (json.JSONDecodeError, TypeError):
                pass
            fares: dict[str, float] = {}
            for item in value.split(","):
                if not item.strip():
                    continue
                mode, sep, price = item.partition("=")
                if not sep or not mode.strip():
                    raise ValueError(f"Invalid mode fare entry '{item.strip()}', expected MODE=price.")
                fares[mode.strip().upper()] = float(price)
            return fares
        # Return empty mapping if value is None or empty
        return {}


settings = Settings()
