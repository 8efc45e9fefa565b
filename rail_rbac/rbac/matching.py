"""
Built-in name-matching predicates for pattern roles.

Each predicate receives ``(key1, key2)`` where ``key1`` is the name being
introduced or looked up and ``key2`` the existing name it is compared to.
"""

import fnmatch
import logging
import re
from functools import lru_cache
from typing import Any, Optional

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .types import MatchingFunction

logger = logging.getLogger(__name__)

_PARAM_SEGMENT = re.compile(r":[^/]+")


@lru_cache(maxsize=256)
def _compile(pattern: str) -> Optional[re.Pattern]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.warning("Invalid role pattern %r: %s", pattern, exc)
        return None


def key_match(key1: str, key2: str) -> bool:
    """
    ``key2`` may end with ``*``: ``/foo/bar`` matches ``/foo/*``.
    Without a wildcard the keys must be equal.
    """
    index = key2.find("*")
    if index == -1:
        return key1 == key2
    if len(key1) > index:
        return key1[:index] == key2[:index]
    return key1 == key2[:index]


def key_match2(key1: str, key2: str) -> bool:
    """
    ``key2`` may contain ``:param`` segments and ``*``:
    ``/alice/data`` matches ``/:user/data`` and ``/alice/*``.
    """
    pattern = key2.replace("/*", "/.*")
    pattern = _PARAM_SEGMENT.sub("[^/]+", pattern)
    compiled = _compile(f"^{pattern}$")
    return compiled is not None and compiled.match(key1) is not None


def regex_match(key1: str, key2: str) -> bool:
    """``key2`` is a regular expression searched in ``key1``."""
    compiled = _compile(key2)
    return compiled is not None and compiled.search(key1) is not None


def glob_match(key1: str, key2: str) -> bool:
    """``key2`` is a shell-style glob pattern."""
    return fnmatch.fnmatchcase(key1, key2)


BUILTIN_MATCHING_FUNCTIONS: dict[str, MatchingFunction] = {
    "key_match": key_match,
    "key_match2": key_match2,
    "regex_match": regex_match,
    "glob_match": glob_match,
}


def resolve_matching_function(value: Any) -> Optional[MatchingFunction]:
    """
    Turn a setting value into a matching predicate.

    Accepts ``None``, a callable, the name of a built-in predicate or a
    dotted import path to a callable.
    """
    if value is None:
        return None
    if callable(value):
        return value

    name = str(value).strip()
    if not name:
        return None
    if name in BUILTIN_MATCHING_FUNCTIONS:
        return BUILTIN_MATCHING_FUNCTIONS[name]
    if "." in name:
        try:
            func = import_string(name)
        except ImportError as exc:
            raise ImproperlyConfigured(
                f"Cannot import matching function '{name}': {exc}"
            ) from exc
        if not callable(func):
            raise ImproperlyConfigured(f"Matching function '{name}' is not callable")
        return func

    raise ImproperlyConfigured(
        f"Unknown matching function '{name}'. "
        f"Expected one of {sorted(BUILTIN_MATCHING_FUNCTIONS)} or a dotted path."
    )


__all__ = [
    "BUILTIN_MATCHING_FUNCTIONS",
    "glob_match",
    "key_match",
    "key_match2",
    "regex_match",
    "resolve_matching_function",
]
