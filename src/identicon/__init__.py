"""`Identicon` - deterministic square icons derived from strings.

Subpackages:
- stages: Hashing, color, grid, pixel map, rasterizing
- pipeline: Processor and persister
- contracts: Stage boundary invariants
- schemas: Pydantic configuration
- cli: Command-line runner
"""

__version__ = "0.1.0"
