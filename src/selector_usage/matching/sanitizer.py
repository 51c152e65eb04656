"""Selector sanitation for static DOM queries.

A parsed HTML page has no interaction state and no generated content, so
selectors such as ``a:hover`` or ``.icon::before`` can never match as
written. With those tokens stripped the query asks whether the element the
rule targets exists at all.

The token list is fixed. Other pseudo syntax the query engine rejects
(``:has()``, ``:is()`` ...) is left alone and ends up classified as invalid.
"""

from __future__ import annotations

__all__ = ["UNSUPPORTED_PSEUDO_TOKENS", "VENDOR_PSEUDO_PREFIXES", "remove_pseudo", "should_be_ignored"]

# Applied in this order. Single-colon forms go first, so ``a::after`` is left
# as ``a:`` and reported invalid.
UNSUPPORTED_PSEUDO_TOKENS = (
    ":checked",
    ":focus",
    ":active",
    ":visited",
    ":hover",
    ":after",
    "::after",
    ":before",
    "::before",
)

VENDOR_PSEUDO_PREFIXES = (":-moz-", ":-ms-", ":-webkit-")


def remove_pseudo(selector: str = "") -> str:
    """Remove every occurrence of the unsupported pseudo tokens.

    Plain substring removal, not CSS parsing: a selector left malformed by
    the stripping is reported as invalid by the matcher.
    """
    for token in UNSUPPORTED_PSEUDO_TOKENS:
        selector = selector.replace(token, "")
    return selector


def should_be_ignored(selector: str) -> bool:
    """True for vendor-prefixed pseudo selectors such as ``::-webkit-scrollbar``."""
    return any(prefix in selector for prefix in VENDOR_PSEUDO_PREFIXES)
