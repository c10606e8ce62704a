"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism for all contracts.
"""

from identicon.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Enforce a pipeline contract.

    Called at stage boundaries to verify the preceding stage produced the
    guaranteed invariants. No recovery, no fallback, no silence.

    Parameters
    ----------
    condition : bool
        The invariant that must be true. If False, ContractViolation is raised.

    message : str
        Error message explaining the contract violation (for debugging).

    Raises
    ------
    ContractViolation
        If condition is False. This indicates a bug in pipeline logic.

    Examples
    --------
    >>> require(len(image.hash) == 16, "Hash contract: expected 16 bytes")
    """
    if not condition:
        raise ContractViolation(message)
