"""Centralized failure types for the identicon pipeline.

Contracts fail fast, loud, and once. All stage-boundary violations raise
the same exception type, allowing callers to handle pipeline bugs uniformly.
"""


class ContractViolation(RuntimeError):
    """Raised when a pipeline contract is violated.

    This indicates a bug in pipeline logic, not bad user input. It means a
    stage did not produce the invariants it promised, or a record reached a
    stage it cannot be valid for (e.g. a grid index outside the canvas).

    Key distinction:
    - ValidationError: Config error (handled by Pydantic)
    - InsufficientDataError: Input too short to derive an identicon
    - ContractViolation: Pipeline bug (programmer error)
    - OSError: Persisting the image failed
    """
    pass


class InsufficientDataError(ValueError):
    """Raised when a hash is too short to derive a color or a grid row.

    No default is substituted: a padded hash would produce an identicon
    that does not represent its input.
    """

    def __init__(self, required: int, actual: int):
        self.required = required
        self.actual = actual
        super().__init__(
            f"Insufficient hash data: need at least {required} bytes, got {actual}"
        )
