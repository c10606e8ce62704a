"""Identicon User Configuration.

This is the user-facing configuration file. Modify settings here to customize
the generated images. Defaults live in identicon.schemas.param.

Usage:
    python scripts/make_identicon.py apple -c scripts/user_config.py
    identicon apple ball -c scripts/user_config.py --output-dir /tmp/icons
"""

CONFIG = {
    # ========================================================================
    # OUTPUT
    # ========================================================================
    "OUTPUT_DIR": "./identicons",  # Files are written as <input>.<format>
    "IMAGE_FORMAT": "png",         # "png", "jpeg" or "bmp"
    "SANITIZE_NAMES": True,        # Replace '/' and '\' in file names

    # ========================================================================
    # HASHING
    # ========================================================================
    "HASH_ALGORITHM": "md5",       # "md5", "blake2b" or "blake2s"
    "HASH_KEY": None,              # Secret key, blake2 only

    # ========================================================================
    # CANVAS
    # ========================================================================
    "CELL_SIZE": 50,               # 5 cells per side -> 250x250 pixels
    "BACKGROUND": "white",         # Any Pillow color name or "#rrggbb"

    # ========================================================================
    # LOGGING
    # ========================================================================
    "LOG_LEVEL": "INFO",
}
