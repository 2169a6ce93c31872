"""
Exception types raised by elbsync.
"""

from typing import Optional


class ElbsyncError(Exception):
    """Base class for all elbsync errors."""


class TransportError(ElbsyncError):
    """
    Raised when a call to the load balancing API fails.

    The original botocore exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, message: str, code: Optional[str] = None):
        self.operation = operation
        self.code = code
        super().__init__(f"{operation} failed: {message}")
