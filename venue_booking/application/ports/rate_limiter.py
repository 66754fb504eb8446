from abc import ABC, abstractmethod


class RateLimiterPort(ABC):
    @abstractmethod
    def is_allowed(self, key: str) -> bool:
        """Record an attempt under key if the window has room. Returns False when throttled."""
        raise NotImplementedError

    @abstractmethod
    def get_remaining_time(self, key: str) -> int:
        """Milliseconds until the next attempt under key would be allowed."""
        raise NotImplementedError
