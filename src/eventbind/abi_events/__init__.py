import json
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any, Literal

from eth_utils.abi import event_signature_to_log_topic
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from eventbind.core.errors import ConfigurationError


class AbiInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    indexed: bool = False
    internalType: str | None = None
    components: tuple["AbiInput", ...] | None = None

    @property
    def canonical_type(self) -> str:
        """ABI type as it appears in a signature, tuple components expanded."""
        if self.type.startswith("tuple"):
            inner = ",".join(component.canonical_type for component in self.components or ())
            return f"({inner}){self.type[len('tuple'):]}"
        return self.type


class AbiEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    inputs: tuple[AbiInput, ...] = ()
    anonymous: bool = False
    type: Literal["event"] = "event"

    @field_validator("inputs", mode="before")
    @classmethod
    def _name_unnamed_inputs(cls, inputs: Any) -> Any:
        if not isinstance(inputs, Sequence):
            return inputs
        named = []
        for idx, item in enumerate(inputs):
            if isinstance(item, Mapping) and not item.get("name"):
                item = {**item, "name": f"arg{idx}"}
            named.append(item)
        return named

    @property
    def signature(self) -> str:
        return get_event_signature(self)

    @property
    def id(self) -> bytes:
        return get_event_id(self)


def get_event_signature(event: AbiEvent) -> str:
    return f"{event.name}({','.join(event_input.canonical_type for event_input in event.inputs)})"


def get_event_id(event: AbiEvent) -> bytes:
    return event_signature_to_log_topic(get_event_signature(event))


def get_event_topic0(event: AbiEvent) -> str:
    return "0x" + get_event_id(event).hex()


class ContractAbi:
    """
    Events of one contract ABI, indexed by keccak ID and by name.

    Built once from validated `AbiEvent` models and only read afterwards.
    """

    def __init__(self, events: Iterable[AbiEvent], *, source_name: str = "<abi>") -> None:
        self._source_name = source_name
        self._events = tuple(events)
        self._by_id: dict[bytes, AbiEvent] = {}
        self._by_name: dict[str, list[AbiEvent]] = {}
        for event in self._events:
            event_id = event.id
            if event_id in self._by_id:
                raise ConfigurationError(f"ABI {source_name!r} declares event {event.signature} twice")
            self._by_id[event_id] = event
            self._by_name.setdefault(event.name, []).append(event)

    @property
    def source_name(self) -> str:
        return self._source_name

    @property
    def events(self) -> tuple[AbiEvent, ...]:
        return self._events

    def event_by_id(self, event_id: bytes) -> AbiEvent | None:
        return self._by_id.get(bytes(event_id))

    def events_by_name(self, name: str) -> list[AbiEvent]:
        return list(self._by_name.get(name, ()))

    def __len__(self) -> int:
        return len(self._events)

    def __repr__(self) -> str:
        return f"ContractAbi({self._source_name!r}, events={len(self._events)})"


AbiJson = Iterable[dict[str, Any]]
AbiSpec = AbiJson | Path


def _load_abi(abi: AbiSpec) -> AbiJson:
    if isinstance(abi, Path):
        try:
            data = json.loads(abi.read_text())
        except OSError as e:
            raise ConfigurationError(f"Error opening ABI file {str(abi)!r}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Error parsing ABI file {str(abi)!r}: {e}") from e
    else:
        data = abi
    # Hardhat / Foundry artifacts wrap the entry list
    if isinstance(data, Mapping):
        data = data.get("abi")
    if not isinstance(data, Iterable) or isinstance(data, (str, bytes)):
        raise ConfigurationError("ABI must be a JSON list of entries or an artifact with an 'abi' list")
    return data


def get_events_from_abi(abi: AbiSpec) -> list[AbiEvent]:
    events: list[AbiEvent] = []
    for entry in _load_abi(abi):
        if not isinstance(entry, Mapping):
            raise ConfigurationError(f"ABI entry is not an object: {entry!r}")
        if entry.get("type", "function") != "event":
            continue
        try:
            events.append(AbiEvent.model_validate(entry))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid ABI event {entry.get('name')!r}: {e}") from e
    return events


def load_abi(abi: AbiSpec, *, source_name: str | None = None) -> ContractAbi:
    """Parse an ABI (file path or already-decoded entry list) into a ContractAbi."""
    if source_name is None:
        source_name = abi.name if isinstance(abi, Path) else "<abi>"
    return ContractAbi(get_events_from_abi(abi), source_name=source_name)
