"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs with aliases for common naming patterns
(e.g., OUTPUT_DIR → output_dir, BACKGROUND → background).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults.
"""

from typing import Optional
from pydantic import Field, field_validator
from identicon.schemas.base import IdenticonBaseModel


class UserHasherConfig(IdenticonBaseModel):
    """User-facing hasher config."""
    algorithm: Optional[str] = None
    key: Optional[str] = None


class UserCanvasConfig(IdenticonBaseModel):
    """User-facing canvas config."""
    cell_size: Optional[int] = None
    background: Optional[str] = None


class UserOutputConfig(IdenticonBaseModel):
    """User-facing output config."""
    directory: Optional[str] = None
    image_format: Optional[str] = None
    sanitize_names: Optional[bool] = None


class UserConfig(IdenticonBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.

    Usage
    -----
        user_cfg = UserConfig(
            output_dir="/data/avatars",
            background="black",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Flat aliases
    output_dir: Optional[str] = Field(None, alias="OUTPUT_DIR")
    image_format: Optional[str] = Field(None, alias="IMAGE_FORMAT")
    sanitize_names: Optional[bool] = Field(None, alias="SANITIZE_NAMES")
    hash_algorithm: Optional[str] = Field(None, alias="HASH_ALGORITHM")
    hash_key: Optional[str] = Field(None, alias="HASH_KEY")
    cell_size: Optional[int] = Field(None, alias="CELL_SIZE")
    background: Optional[str] = Field(None, alias="BACKGROUND")
    log_level: Optional[str] = Field(None, alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="LOG_FILE")

    # Nested overrides (advanced users)
    hasher: Optional[UserHasherConfig] = None
    canvas: Optional[UserCanvasConfig] = None
    output: Optional[UserOutputConfig] = None

    model_config = IdenticonBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown legacy keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("hash_algorithm", "log_level", mode="before")
    @classmethod
    def normalize_names(cls, v):
        """Strip names; case is normalized per field in to_internal_overrides."""
        if isinstance(v, str):
            return v.strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        # Hasher section
        hasher = {}
        if self.hash_algorithm is not None:
            hasher["algorithm"] = self.hash_algorithm.lower()
        if self.hash_key is not None:
            hasher["key"] = self.hash_key
        if self.hasher is not None:
            hasher.update(self.hasher.model_dump(exclude_none=True))
        if hasher:
            overrides["hasher"] = hasher

        # Canvas section
        canvas = {}
        if self.cell_size is not None:
            canvas["cell_size"] = self.cell_size
        if self.background is not None:
            canvas["background"] = self.background
        if self.canvas is not None:
            canvas.update(self.canvas.model_dump(exclude_none=True))
        if canvas:
            overrides["canvas"] = canvas

        # Output section
        output = {}
        if self.output_dir is not None:
            output["directory"] = str(self.output_dir)
        if self.image_format is not None:
            output["image_format"] = self.image_format
        if self.sanitize_names is not None:
            output["sanitize_names"] = self.sanitize_names
        if self.output is not None:
            output.update(self.output.model_dump(exclude_none=True))
        if output:
            overrides["output"] = output

        # Logging section
        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level.upper()
        if self.log_file is not None:
            logging_cfg["log_file"] = self.log_file
        if logging_cfg:
            overrides["logging"] = logging_cfg

        return overrides
