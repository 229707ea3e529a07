from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from eventbind.abi_events import AbiEvent


# ---------------------------------------------------------------------------
# IAbiProvider
# ---------------------------------------------------------------------------

@runtime_checkable
class IAbiProvider(Protocol):
    """
    Read-only view over the events of one contract ABI.

    Domain expectations:
    - It is fully loaded before the first lookup and never mutated afterwards.
    - Each 32-byte event ID maps to at most one event.
    - Event inputs keep their ABI order.
    """

    @property
    def source_name(self) -> str:
        """
        Human-readable origin of the ABI (file name, artifact name...).

        Used only in diagnostics.
        """
        ...

    @property
    def events(self) -> Sequence[AbiEvent]:
        """Every event of the ABI, in declaration order."""
        ...

    def event_by_id(self, event_id: bytes) -> AbiEvent | None:
        """
        Return the event whose keccak ID equals `event_id`, or None.

        Implementations:
        - JSON ABI file loader (`ContractAbi`)
        - In-memory ABI for testing
        """
        ...

    def events_by_name(self, name: str) -> list[AbiEvent]:
        """Return every event called `name` (several when overloaded)."""
        ...
