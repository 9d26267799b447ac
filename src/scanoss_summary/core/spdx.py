# spdx.py
# SPDX-License-Identifier: MIT
"""SPDX license expression helpers backed by the ``license-expression`` library.

Only the handful of operations the findings pipeline needs are exposed:
parsing, validity checking against the SPDX license list, conjunction, and a
canonical sorted rendering.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING

from license_expression import ExpressionError, Licensing, get_spdx_licensing

if TYPE_CHECKING:  # pragma: no cover - type checking only
    from boolean import Expression as LicenseExpression

__all__ = [
    "NOASSERTION",
    "NONE",
    "LICENSE_REF_PREFIX",
    "DOCUMENT_REF_PREFIX",
    "LicenseExpressionError",
    "parse_license_expression",
    "is_valid_expression",
    "and_expressions",
    "sorted_canonical_form",
    "license_ref",
    "apply_detected_license_mapping",
]

NOASSERTION = "NOASSERTION"
NONE = "NONE"
LICENSE_REF_PREFIX = "LicenseRef-"
DOCUMENT_REF_PREFIX = "DocumentRef-"

_SPECIAL_KEYS = frozenset({NOASSERTION, NONE})

# SPDX idstring, optionally qualified as "DocumentRef-<doc>:LicenseRef-<id>".
_IDSTRING_RE = re.compile(r"(?:DocumentRef-[A-Za-z0-9.+-]+:)?[A-Za-z0-9.+-]+", re.ASCII)


class LicenseExpressionError(ValueError):
    """Raised when text cannot be parsed as a license expression."""


@lru_cache(maxsize=1)
def _licensing() -> Licensing:
    # Building the SPDX symbol table is slow; do it once per process.
    return get_spdx_licensing()


def parse_license_expression(text: str) -> LicenseExpression:
    """Parse ``text`` into a license expression.

    Raises:
        LicenseExpressionError: If ``text`` is empty, not a syntactically
            valid expression, or holds a license key that is not an SPDX
            idstring (for example one containing spaces).
    """
    try:
        expression = _licensing().parse(text)
    except ExpressionError as exc:
        raise LicenseExpressionError(f"Cannot parse license expression {text!r}: {exc}") from exc
    if expression is None:
        raise LicenseExpressionError(f"Empty license expression {text!r}")
    for key in _licensing().license_keys(expression):
        if not _IDSTRING_RE.fullmatch(key):
            raise LicenseExpressionError(f"Invalid license identifier {key!r} in {text!r}")
    return expression


def is_valid_expression(expression: LicenseExpression) -> bool:
    """Return True if every license key is an SPDX id or an SPDX reference."""
    for key in _licensing().unknown_license_keys(expression):
        if key in _SPECIAL_KEYS:
            continue
        if key.startswith((LICENSE_REF_PREFIX, DOCUMENT_REF_PREFIX)):
            continue
        return False
    return True


def and_expressions(left: LicenseExpression, right: LicenseExpression) -> LicenseExpression:
    return _licensing().AND(left, right)


def _sorted(expression: LicenseExpression) -> LicenseExpression:
    if expression.isliteral:
        return expression
    operator = type(expression)
    args: list[LicenseExpression] = []
    for arg in expression.args:
        arg = _sorted(arg)
        # Nested nodes of the same operator are flattened into this one.
        args.extend(arg.args if isinstance(arg, operator) else (arg,))
    args = sorted(dict.fromkeys(args), key=str)
    if len(args) == 1:
        return args[0]
    return operator(*args)


def sorted_canonical_form(expression: LicenseExpression) -> str:
    """Render ``expression`` with flattened, sorted operands.

    Operands are only reordered and repeated ones dropped; no boolean
    simplification happens, so ``MIT AND (MIT OR Apache-2.0)`` keeps both
    terms. The result does not depend on the order operands were combined in.
    """
    return str(_sorted(expression))


def license_ref(tool: str, name: str) -> str:
    """Wrap ``name`` as a tool-scoped license reference."""
    return f"{LICENSE_REF_PREFIX}{tool}-{name}"


def apply_detected_license_mapping(license: str, mapping: Mapping[str, str] | None) -> str:
    """Return the mapped license for an exact match, else ``license`` unchanged."""
    if not mapping:
        return license
    return mapping.get(license, license)
