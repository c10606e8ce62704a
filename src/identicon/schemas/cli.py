"""CLIConfig: Command-line operational overrides.

Minimal configuration for parameters that commonly change between runs:
output directory, image format, verbosity.
"""

from typing import Literal, Optional
from identicon.schemas.base import IdenticonBaseModel


class CLIConfig(IdenticonBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution.

    Usage
    -----
        cli_cfg = CLIConfig(output_dir="/tmp/icons", log_level="DEBUG")
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    output_dir: Optional[str] = None
    image_format: Optional[str] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    log_file: Optional[str] = None

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        output = {}
        if self.output_dir is not None:
            output["directory"] = str(self.output_dir)
        if self.image_format is not None:
            output["image_format"] = self.image_format
        if output:
            overrides["output"] = output

        logging_cfg = {}
        if self.log_level is not None:
            logging_cfg["level"] = self.log_level
        if self.log_file is not None:
            logging_cfg["log_file"] = self.log_file
        if logging_cfg:
            overrides["logging"] = logging_cfg

        return overrides
