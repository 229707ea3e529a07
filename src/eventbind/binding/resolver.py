"""Event lookup: configuration identifier → ABI event.

An identifier is either a canonical signature, e.g.
  "Transfer(address,address,uint256)"
whose keccak digest is the event ID, or a bare event name, e.g.
  "Transfer"
which is looked up by name when its digest matches no event.
"""

from __future__ import annotations

from eth_utils import keccak

from eventbind.abi_events import AbiEvent
from eventbind.core.errors import AmbiguousEventError, EventNotFoundError
from eventbind.core.interfaces import IAbiProvider


def event_lookup_key(identifier: str) -> bytes:
    """32-byte keccak digest of the identifier's UTF-8 bytes.

    Whitespace is insignificant in signatures ("Transfer(address, uint256)").
    """
    key = identifier.strip()
    if is_signature(key):
        key = "".join(key.split())
    return keccak(text=key)


def is_signature(identifier: str) -> bool:
    return "(" in identifier


def resolve_event(abi: IAbiProvider, identifier: str) -> AbiEvent:
    """Return the ABI event named by `identifier`.

    Raises `EventNotFoundError` when nothing matches and `AmbiguousEventError`
    when a bare name matches several overloads.
    """
    event = abi.event_by_id(event_lookup_key(identifier))
    if event is not None:
        return event

    name = identifier.strip()
    if is_signature(name):
        raise EventNotFoundError(identifier, abi.source_name)

    matches = abi.events_by_name(name)
    if not matches:
        raise EventNotFoundError(identifier, abi.source_name)
    if len(matches) > 1:
        raise AmbiguousEventError(identifier, abi.source_name, [m.signature for m in matches])
    return matches[0]
