"""Exceptions raised while turning ABI events into bindings.

Every error is fatal for a run: the CLI reports it as a single diagnostic
line and exits non-zero, nothing is written.
"""

from __future__ import annotations

from collections.abc import Sequence


class EventbindError(Exception):
    """Base exception for eventbind."""


class ConfigurationError(EventbindError):
    """Malformed or missing configuration / ABI input."""


class EventNotFoundError(EventbindError):
    """A requested event identifier does not resolve against the ABI."""

    def __init__(self, identifier: str, abi_source: str, message: str | None = None) -> None:
        super().__init__(message or f"Couldn't find event {identifier!r} in ABI {abi_source!r}")
        self.identifier = identifier
        self.abi_source = abi_source


class AmbiguousEventError(EventNotFoundError):
    """A bare event name matches several overloaded events."""

    def __init__(self, identifier: str, abi_source: str, candidates: Sequence[str]) -> None:
        super().__init__(
            identifier,
            abi_source,
            f"Event name {identifier!r} is ambiguous in ABI {abi_source!r}; "
            f"use one of: {', '.join(candidates)}",
        )
        self.candidates = tuple(candidates)


class UnsupportedTypeError(EventbindError):
    """An argument's Solidity type has no Go counterpart in the type table."""

    def __init__(self, source_type: str, *, event: str | None = None, argument: str | None = None) -> None:
        where = ""
        if argument is not None:
            where += f" (argument {argument!r}"
            where += f" of event {event!r})" if event is not None else ")"
        elif event is not None:
            where += f" in event {event!r}"
        super().__init__(f"Solidity type {source_type}{where} not supported")
        self.source_type = source_type
        self.event = event
        self.argument = argument


class IdentifierCollisionError(EventbindError):
    """Two arguments of one event normalize to the same Go identifier."""

    def __init__(self, event: str, target_name: str, source_names: Sequence[str]) -> None:
        super().__init__(
            f"Arguments {' and '.join(repr(n) for n in source_names)} of event {event!r} "
            f"both map to Go field {target_name}"
        )
        self.event = event
        self.target_name = target_name
        self.source_names = tuple(source_names)


class EventNameCollisionError(EventbindError):
    """Two distinct requested events map to the same Go type name."""

    def __init__(self, target_name: str, signatures: Sequence[str]) -> None:
        super().__init__(
            f"Events {' and '.join(signatures)} both map to Go type {target_name}; "
            f"request only one of them"
        )
        self.target_name = target_name
        self.signatures = tuple(signatures)


class DuplicateEventError(EventbindError):
    """The same ABI event was requested more than once."""

    def __init__(self, identifier: str, event: str) -> None:
        super().__init__(f"Event {event!r} requested twice (again as {identifier!r})")
        self.identifier = identifier
        self.event = event


class RenderError(EventbindError):
    """Template lookup or execution failed."""


class FormatError(RenderError):
    """gofmt rejected the rendered source."""
