"""Event resolution and Solidity → Go translation.

This package provides:
- Event resolver (identifier → ABI event)
- Closed Solidity → Go type table
- Argument name normalizer (exported Go identifiers)
- Model builder assembling the `GenerationModel` fed to templates
"""

from eventbind.binding.builder import build_event, build_model
from eventbind.binding.names import normalize_name
from eventbind.binding.resolver import event_lookup_key, resolve_event
from eventbind.binding.types import GO_TYPE_IMPORTS, SOLIDITY_TO_GO, map_type

__all__ = [
    "build_event",
    "build_model",
    "normalize_name",
    "event_lookup_key",
    "resolve_event",
    "GO_TYPE_IMPORTS",
    "SOLIDITY_TO_GO",
    "map_type",
]
