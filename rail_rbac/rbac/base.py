from abc import ABC, abstractmethod
from typing import Optional

from .types import MatchingFunction


class RoleManager(ABC):
    """Contract the policy engine uses to drive a role hierarchy."""

    @abstractmethod
    def add_matching_fn(self, matching_fn: MatchingFunction) -> None:
        """Install the name-matching predicate used for pattern roles."""
        pass

    @abstractmethod
    def add_link(self, name1: str, name2: str, domain: Optional[str] = None) -> None:
        """Record that ``name1`` inherits ``name2``."""
        pass

    @abstractmethod
    def delete_link(
        self, name1: str, name2: str, domain: Optional[str] = None
    ) -> None:
        """Remove the direct inheritance link between two known roles."""
        pass

    @abstractmethod
    def has_link(self, name1: str, name2: str, domain: Optional[str] = None) -> bool:
        """Whether ``name1`` inherits ``name2``, directly or transitively."""
        pass

    @abstractmethod
    def get_roles(self, name: str, domain: Optional[str] = None) -> list[str]:
        """Direct roles of ``name``."""
        pass

    @abstractmethod
    def get_users(self, name: str, domain: Optional[str] = None) -> list[str]:
        """Names that directly inherit ``name``."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every role and link."""
        pass


__all__ = ["RoleManager"]
