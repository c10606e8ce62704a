"""ParamConfig: Expert defaults for the identicon pipeline.

This module defines the complete default configuration. ALL pipeline
parameters must have defaults here. No runtime code should define fallback
values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from identicon.schemas.base import IdenticonBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class HasherConfig(IdenticonBaseModel):
    """Digest configuration."""
    algorithm: Literal["md5", "blake2b", "blake2s"] = "md5"
    key: Optional[str] = Field(None, description="Secret key (blake2 only)")

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v):
        """Normalize algorithm names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class CanvasConfig(IdenticonBaseModel):
    """Canvas geometry and background."""
    cell_size: int = Field(50, ge=1, description="Side of one grid cell in pixels")
    background: str = "white"


class OutputConfig(IdenticonBaseModel):
    """Output file configuration."""
    directory: str = "."
    image_format: Literal["png", "jpeg", "bmp"] = "png"
    sanitize_names: bool = True

    @field_validator("image_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Accept 'PNG', 'jpg' and similar spellings."""
        if isinstance(v, str):
            v = v.lower().strip().lstrip(".")
            return "jpeg" if v == "jpg" else v
        return v


class LoggingConfig(IdenticonBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Optional[str] = None


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(IdenticonBaseModel):
    """Expert configuration with complete defaults.

    This is the single source of truth for all pipeline parameters.
    Every tunable parameter MUST have a default here.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)

    Runtime code only sees InternalConfig.
    """

    hasher: HasherConfig = Field(default_factory=HasherConfig)
    canvas: CanvasConfig = Field(default_factory=CanvasConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
