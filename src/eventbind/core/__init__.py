"""Core data models, configuration, interfaces and errors.

This package provides:
- Generation model (TargetArgument, TargetEvent, GenerationModel)
- Configuration (GenerateConfig, load_config)
- ABI provider interface (IAbiProvider)
- Error hierarchy rooted at EventbindError
"""

from eventbind.core.config import GenerateConfig, load_config
from eventbind.core.errors import (
    AmbiguousEventError,
    ConfigurationError,
    DuplicateEventError,
    EventbindError,
    EventNameCollisionError,
    EventNotFoundError,
    FormatError,
    IdentifierCollisionError,
    RenderError,
    UnsupportedTypeError,
)
from eventbind.core.interfaces import IAbiProvider
from eventbind.core.models import GenerationModel, TargetArgument, TargetEvent

__all__ = [
    "GenerateConfig",
    "load_config",
    "AmbiguousEventError",
    "ConfigurationError",
    "DuplicateEventError",
    "EventbindError",
    "EventNameCollisionError",
    "EventNotFoundError",
    "FormatError",
    "IdentifierCollisionError",
    "RenderError",
    "UnsupportedTypeError",
    "IAbiProvider",
    "GenerationModel",
    "TargetArgument",
    "TargetEvent",
]
