"""
Configuration schema validation using Pydantic
"""

from pathlib import Path
from typing import FrozenSet, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from dex.registry import Protocol

from .constants import DEFAULT_CONFIG, MIN_BUNDLE_SIZE
from .exceptions import ConfigurationError

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class DetectorConfig(BaseModel):
    """Settings for bundle screening"""

    min_bundle_size: int = Field(
        default=DEFAULT_CONFIG["min_bundle_size"],
        ge=MIN_BUNDLE_SIZE,
        description="Bundles with fewer transactions are always clean",
    )
    sort_pools: bool = Field(
        default=DEFAULT_CONFIG["sort_pools"],
        description="Scan pools in byte order instead of first-seen order",
    )
    liquidity_check: bool = Field(
        default=DEFAULT_CONFIG["liquidity_check"],
        description="Run the swap/liquidity/swap check",
    )
    protocols: Optional[List[str]] = Field(
        default=None, description="Protocols to decode (default: all)"
    )
    log_level: str = Field(default=DEFAULT_CONFIG["log_level"])

    @field_validator("protocols")
    @classmethod
    def validate_protocols(cls, v):
        if v is None:
            return v
        known = {p.value for p in Protocol}
        unknown = [name for name in v if name not in known]
        if unknown:
            raise ValueError(
                f"Unknown protocols {unknown}; expected any of {sorted(known)}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def enabled_protocols(self) -> Optional[FrozenSet[Protocol]]:
        """Protocol filter for the dispatcher; None means every protocol."""
        if self.protocols is None:
            return None
        return frozenset(Protocol(name) for name in self.protocols)


def load_config(config_path: Union[str, Path]) -> DetectorConfig:
    """
    Load and validate detector config from a YAML file.

    Args:
        config_path: Path to config YAML file

    Returns:
        Validated DetectorConfig instance

    Raises:
        ConfigurationError: If the file is missing, unparseable or invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML: {e}") from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError("Config file must contain a YAML dictionary")

    # Allow the settings to live under a top-level "detector" key
    if "detector" in config_dict and isinstance(config_dict["detector"], dict):
        config_dict = config_dict["detector"]

    try:
        return DetectorConfig(**config_dict)
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid detector config: {e}", details={"config_file": str(config_path)}
        ) from e
