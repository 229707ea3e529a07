"""Solidity → Go type table.

The table is closed: a Solidity type missing here is rejected, never guessed.
Supporting a new type only requires a new `SOLIDITY_TO_GO` entry (plus a
`GO_TYPE_IMPORTS` entry when the Go type lives in another package).
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from eventbind.constants import GO_ETHEREUM_COMMON, GO_MATH_BIG
from eventbind.core.errors import UnsupportedTypeError

SOLIDITY_TO_GO: Mapping[str, str] = MappingProxyType(
    {
        "uint8": "uint8",
        "uint256": "*big.Int",
        "string": "string",
        "address": "common.Address",
        "bytes": "[]byte",
    }
)

# Go import path required by a mapped type (builtins need none).
GO_TYPE_IMPORTS: Mapping[str, str] = MappingProxyType(
    {
        "*big.Int": GO_MATH_BIG,
        "common.Address": GO_ETHEREUM_COMMON,
    }
)


def map_type(source_type: str, *, event: str | None = None, argument: str | None = None) -> str:
    """Return the Go type for a Solidity type or raise `UnsupportedTypeError`.

    `event` / `argument` only enrich the error message.
    """
    try:
        return SOLIDITY_TO_GO[source_type]
    except KeyError:
        raise UnsupportedTypeError(source_type, event=event, argument=argument) from None


def is_supported(source_type: str) -> bool:
    return source_type in SOLIDITY_TO_GO
