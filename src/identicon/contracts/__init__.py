"""Pipeline contracts: fail-fast enforcement of stage invariants.

Contracts fail immediately and loudly when pipeline stages don't produce
their promised invariants.

Key principle:
- Pydantic validates config and record shape
- Contracts validate pipeline correctness
- Stages are total functions over well-formed input
"""

from identicon.contracts.failure import ContractViolation, InsufficientDataError
from identicon.contracts.base import require
from identicon.contracts.hash import assert_hashed
from identicon.contracts.grid import assert_gridded
from identicon.contracts.pixel_map import assert_mapped, assert_drawable
from identicon.contracts.invariants import PIPELINE_INVARIANTS, STAGE_REQUIREMENTS

__all__ = [
    "ContractViolation",
    "InsufficientDataError",
    "require",
    "assert_hashed",
    "assert_gridded",
    "assert_mapped",
    "assert_drawable",
    "PIPELINE_INVARIANTS",
    "STAGE_REQUIREMENTS",
]
