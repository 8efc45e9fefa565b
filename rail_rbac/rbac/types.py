"""
Type definitions for the role hierarchy.

- MatchingFunction: predicate ``(new_name, existing_name) -> bool``
- RoleLink: a single link declaration as loaded from settings or role files
"""

from dataclasses import dataclass
from typing import Callable, Optional

MatchingFunction = Callable[[str, str], bool]


@dataclass(frozen=True)
class RoleLink:
    """Declaration of ``user`` inheriting ``role``, optionally inside ``domain``."""

    user: str
    role: str
    domain: Optional[str] = None


__all__ = ["MatchingFunction", "RoleLink"]
