"""
Custom exceptions for the role manager.

This module defines specific exception types for better error handling
by the policy engine driving the role manager.
"""

from typing import Optional


class RoleManagerError(Exception):
    """Base exception for role manager errors."""


class RoleNotFoundError(RoleManagerError):
    """Raised when a link endpoint is not known to the role manager."""

    def __init__(self, name1: str, name2: str, message: Optional[str] = None):
        self.name1 = name1
        self.name2 = name2
        super().__init__(message or f"{name1} OR {name2}")


class InvalidRoleNameError(RoleManagerError, ValueError):
    """Raised when a role name or domain cannot be used as a link endpoint."""

    def __init__(self, message: str, name: Optional[str] = None):
        self.name = name
        super().__init__(message)


__all__ = ["RoleManagerError", "RoleNotFoundError", "InvalidRoleNameError"]
