"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and contains no optional fields that processing code depends on.
"""

import hashlib
from typing import Literal, Optional
from pydantic import Field, ConfigDict, field_validator, model_validator
from identicon.schemas.base import IdenticonBaseModel

# Mirrored rows are always 5 cells wide (3-byte chunks), and a 16-byte
# digest yields 5 rows, so the canvas is 5 cells on each side.
GRID_COLS = 5


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalHasherConfig(IdenticonBaseModel):
    """Runtime digest configuration."""
    algorithm: Literal["md5", "blake2b", "blake2s"]
    key: Optional[str]

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v):
        """Normalize algorithm names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @model_validator(mode="after")
    def key_fits_algorithm(self):
        """md5 has no keyed mode; blake2 keys are capped at MAX_KEY_SIZE bytes."""
        if not self.key:
            return self
        if self.algorithm == "md5":
            raise ValueError("hasher.key requires algorithm 'blake2b' or 'blake2s'")
        max_size = getattr(hashlib, self.algorithm).MAX_KEY_SIZE
        if len(self.key_bytes) > max_size:
            raise ValueError(
                f"hasher.key is {len(self.key_bytes)} bytes; "
                f"{self.algorithm} accepts at most {max_size}"
            )
        return self

    @property
    def key_bytes(self) -> Optional[bytes]:
        return self.key.encode("utf-8") if self.key else None


class InternalCanvasConfig(IdenticonBaseModel):
    """Runtime canvas configuration."""
    cell_size: int = Field(ge=1)
    background: str

    @property
    def cols(self) -> int:
        return GRID_COLS

    @property
    def canvas_size(self) -> tuple[int, int]:
        side = GRID_COLS * self.cell_size
        return (side, side)


class InternalOutputConfig(IdenticonBaseModel):
    """Runtime output configuration."""
    directory: str
    image_format: Literal["png", "jpeg", "bmp"]
    sanitize_names: bool

    @field_validator("image_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Accept 'PNG', 'jpg' and similar spellings."""
        if isinstance(v, str):
            v = v.lower().strip().lstrip(".")
            return "jpeg" if v == "jpg" else v
        return v


class InternalLoggingConfig(IdenticonBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_file: Optional[str]


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(IdenticonBaseModel):
    """Authoritative runtime configuration.

    Usage
    -----
    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.cell_size = config.canvas.cell_size  # NOT .get()

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation in runtime code

    All of that happens during config resolution, not in runtime code.
    """

    hasher: InternalHasherConfig
    canvas: InternalCanvasConfig
    output: InternalOutputConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
