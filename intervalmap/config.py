"""Environment-based configuration using pydantic-settings."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class FuzzConfig(BaseSettings):
    """Settings for randomized differential runs, read from ``INTERVALMAP_*``."""

    model_config = SettingsConfigDict(env_prefix="INTERVALMAP_")

    seed: int | None = None
    rounds: int = Field(default=1000, ge=1)
    key_min: int = -1000
    key_max: int = 1000
    value_min: str = Field(default="A", min_length=1, max_length=1)
    value_max: str = Field(default="z", min_length=1, max_length=1)
    initial_value: str = Field(default="a", min_length=1, max_length=1)
    probes_per_round: int = Field(default=10, ge=0)

    @model_validator(mode="after")
    def validate_ranges(self) -> "FuzzConfig":
        """Reject empty key and value ranges.

        Returns:
            The validated FuzzConfig instance.
        """
        if not self.key_min < self.key_max:
            raise ValueError("key_min must be less than key_max")
        if self.value_max < self.value_min:
            raise ValueError("value_min must not exceed value_max")
        return self
