"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class Storage(ABC):
    """Abstract base class for config and per-site score state storage."""

    @abstractmethod
    def load_config(self) -> dict:
        """Load optional configuration. Returns an empty dict when none exists."""
        pass

    @abstractmethod
    def load_state(self, site_key: str) -> dict | None:
        """Load state for a site. Returns state dict or None if not found or unreadable."""
        pass

    @abstractmethod
    def save_state(self, state: dict, site_key: str) -> None:
        """Save state for a site. Must be durable when it returns."""
        pass

    @abstractmethod
    def list_sites(self) -> list[str]:
        """List site keys that have saved state."""
        pass
