"""Model builder: requested identifiers + ABI → `GenerationModel`.

Resolution, type mapping and name normalization run in request order and
stop at the first error; a model is only returned when every requested
event translated cleanly.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from eventbind.abi_events import AbiEvent
from eventbind.binding.names import normalize_name
from eventbind.binding.resolver import resolve_event
from eventbind.binding.types import map_type
from eventbind.core.errors import (
    ConfigurationError,
    DuplicateEventError,
    EventNameCollisionError,
    IdentifierCollisionError,
)
from eventbind.core.interfaces import IAbiProvider
from eventbind.core.models import GenerationModel, TargetArgument, TargetEvent

_GO_PACKAGE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

GO_KEYWORDS = frozenset(
    {
        "break", "case", "chan", "const", "continue", "default", "defer", "else",
        "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
        "map", "package", "range", "return", "select", "struct", "switch", "type", "var",
    }
)


def build_arguments(event: AbiEvent) -> tuple[TargetArgument, ...]:
    """Translate the event inputs, keeping ABI order."""
    args: list[TargetArgument] = []
    seen: dict[str, str] = {}  # target name -> source name
    for event_input in event.inputs:
        target_name = normalize_name(event_input.name)
        if target_name in seen:
            raise IdentifierCollisionError(event.name, target_name, (seen[target_name], event_input.name))
        seen[target_name] = event_input.name
        args.append(
            TargetArgument(
                source_name=event_input.name,
                target_name=target_name,
                target_type=map_type(event_input.type, event=event.name, argument=event_input.name),
            )
        )
    return tuple(args)


def build_event(event: AbiEvent) -> TargetEvent:
    return TargetEvent(
        name=event.name,
        arguments=build_arguments(event),
        id=event.id,
        signature=event.signature,
    )


def build_model(package_name: str, identifiers: Iterable[str], abi: IAbiProvider) -> GenerationModel:
    """Resolve and translate every identifier, in order, into one model."""
    if not _GO_PACKAGE.fullmatch(package_name) or package_name in GO_KEYWORDS:
        raise ConfigurationError(f"Invalid Go package name {package_name!r}")

    events: list[TargetEvent] = []
    requested: set[bytes] = set()
    go_names: dict[str, str] = {}  # Go type name -> signature
    for identifier in identifiers:
        event = resolve_event(abi, identifier)
        if event.id in requested:
            raise DuplicateEventError(identifier, event.name)
        requested.add(event.id)
        # overloads and case variants share one generated type name
        go_name = normalize_name(event.name)
        if go_name in go_names:
            raise EventNameCollisionError(go_name, (go_names[go_name], event.signature))
        go_names[go_name] = event.signature
        events.append(build_event(event))

    return GenerationModel(package_name=package_name, events=tuple(events))
