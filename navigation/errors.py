# navigation/errors.py
from __future__ import annotations


class UnsupportedFrequencyError(ValueError):
    """
    Raised by the arithmetic entry points when a frequency code is not known.

    Boundary lookups never raise this; they log and hand back their input.
    """

    def __init__(self, code: str, operation: str):
        self.code = code
        self.operation = operation
        super().__init__(f'{operation} cannot handle frequency "{code}"')


__all__ = ["UnsupportedFrequencyError"]
