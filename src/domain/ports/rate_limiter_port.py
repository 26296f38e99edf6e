"""
Port (interface) for outbound request rate limiting.
"""

from abc import ABC, abstractmethod


class IRateLimiter(ABC):
    @abstractmethod
    def acquire(self) -> None:
        """Block until the caller may issue one request."""
        ...
