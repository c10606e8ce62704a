"""Core identicon CLI execution logic.

This module contains the actual runner, separated from argument parsing.
Scripts are thin wrappers; this is the real implementation.
"""

import sys
import json
import logging
import argparse
import importlib.util
from pathlib import Path
from typing import Optional, Dict, Any, List

from identicon.pipeline.processor import IdenticonProcessor
from identicon.schemas import resolve_config, ParamConfig, UserConfig, CLIConfig, InternalConfig


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Parameters
    ----------
    config_path : str
        Path to user config Python file containing CONFIG dict.

    Returns
    -------
    dict
        Raw user configuration dictionary.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ImportError
        If the file cannot be loaded as a Python module.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load config module from {path}")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    # Find CONFIG dict
    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def setup_logging(config: InternalConfig) -> None:
    """Configure the root logger with console and optional file handlers.

    Log level and log file come from ``config.logging``.
    """
    log_level = getattr(logging, config.logging.level.upper(), logging.INFO)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    # Clear existing handlers and add new ones
    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if config.logging.log_file:
        log_path = Path(config.logging.log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_path)
        fh.setLevel(log_level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    logger.debug("Logging: level=%s, file=%s", config.logging.level, config.logging.log_file)


def build_config(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> InternalConfig:
    """Resolve the runtime config (Param < User < CLI)."""
    param_cfg = ParamConfig()

    user_cfg = None
    if user_config_path:
        user_cfg = UserConfig.model_validate(load_user_config_dict(user_config_path))

    cli_args = dict(cli_args or {})
    if verbose and "log_level" not in cli_args:
        cli_args["log_level"] = "DEBUG"

    # Filter None values
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    return resolve_config(param_cfg, user_cfg, cli_cfg)


def run_identicon(
    inputs: List[str],
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> List[Path]:
    """Generate one identicon file per input string.

    Parameters
    ----------
    inputs : list of str
        Input strings; each becomes ``<output_dir>/<input>.<format>``.

    user_config_path : str, optional
        Path to user config file (Python file with CONFIG dict).

    cli_args : dict, optional
        CLI overrides. Keys: output_dir, image_format, log_level, log_file.

    verbose : bool, optional
        If True, enable DEBUG logging and print the resolved config.

    Returns
    -------
    list of Path
        Written files, in input order.

    Raises
    ------
    FileNotFoundError
        If user_config_path does not exist.
    pydantic.ValidationError
        If configuration validation fails.
    OSError
        If an image cannot be written. Earlier files stay written.
    """
    config = build_config(user_config_path, cli_args, verbose)
    setup_logging(config)

    if verbose:
        print("Full Internal Configuration:")
        print(json.dumps(config.model_dump(), indent=2))

    processor = IdenticonProcessor(config)
    written = []
    for text in inputs:
        written.append(processor.create(text))

    logger.info("Created %d identicon(s) in %s", len(written), processor.output_dir)
    return written


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Generate deterministic identicon images from strings",
    )
    parser.add_argument("inputs", nargs="+", metavar="TEXT", help="Input string(s)")
    parser.add_argument("-c", "--config", help="Path to user config file")
    parser.add_argument("-o", "--output-dir", help="Output directory")
    parser.add_argument("-f", "--format", dest="image_format",
                        choices=["png", "jpeg", "bmp"], help="Image format")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cli_args = {
        "output_dir": args.output_dir,
        "image_format": args.image_format,
        "log_file": args.log_file,
    }

    try:
        paths = run_identicon(args.inputs, args.config, cli_args, args.verbose)
    except (OSError, ValueError, ImportError, SyntaxError) as e:
        print(f"identicon: error: {e}", file=sys.stderr)
        return 1

    for path in paths:
        print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
