"""Generation model handed to the template stage.

This module defines:
- `TargetArgument`: one event argument translated to Go (name + type).
- `TargetEvent`: one resolved event with its translated arguments.
- `GenerationModel`: the package name and every requested event, in order.

Design notes
------------
- Everything is a frozen dataclass holding tuples; the model is built once
  per run and never mutated.
- Argument order is the ABI input order (positional decoding order).
- Derived values the template needs (hex ID, Go imports) are properties.
"""

from __future__ import annotations

from dataclasses import dataclass

from eventbind.constants import GO_ETHEREUM_COMMON


@dataclass(frozen=True, slots=True)
class TargetArgument:
    """One event argument as it appears in generated Go code."""

    source_name: str  # Solidity name, e.g. "tokenId"
    target_name: str  # exported Go identifier, e.g. "TokenID"
    target_type: str  # Go type, e.g. "*big.Int"


@dataclass(frozen=True, slots=True)
class TargetEvent:
    """One requested event, resolved and translated."""

    name: str
    arguments: tuple[TargetArgument, ...]
    id: bytes  # 32-byte keccak of the canonical signature
    signature: str = ""

    def __post_init__(self) -> None:
        if len(self.id) != 32:
            raise ValueError(f"event {self.name} id must be 32 bytes, got {len(self.id)}")

    @property
    def hex_id(self) -> str:
        return "0x" + self.id.hex()


@dataclass(frozen=True, slots=True)
class GenerationModel:
    """Everything the renderer needs: package name + ordered events."""

    package_name: str
    events: tuple[TargetEvent, ...]

    @property
    def imports(self) -> tuple[str, ...]:
        """Sorted Go import paths required by the mapped argument types.

        `common` is always present: every event ID is a `common.Hash`.
        """
        from eventbind.binding.types import GO_TYPE_IMPORTS

        paths = {GO_ETHEREUM_COMMON}
        for event in self.events:
            for arg in event.arguments:
                path = GO_TYPE_IMPORTS.get(arg.target_type)
                if path:
                    paths.add(path)
        return tuple(sorted(paths))
