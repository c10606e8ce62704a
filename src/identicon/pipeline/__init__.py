"""Pipeline modules.

- processor: Stage composition with contract checks
- persister: Atomic image writes
"""

from identicon.pipeline.processor import IdenticonProcessor, create
from identicon.pipeline.persister import save

__all__ = [
    "IdenticonProcessor",
    "create",
    "save",
]
