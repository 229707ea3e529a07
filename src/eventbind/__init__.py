from __future__ import annotations

from .abi_events import AbiEvent, AbiInput, ContractAbi, load_abi
from .binding import build_model, map_type, normalize_name, resolve_event
from .core.config import GenerateConfig, load_config
from .core.models import GenerationModel, TargetArgument, TargetEvent
from .orchestration import generate, generate_source

__all__ = [
    "AbiEvent",
    "AbiInput",
    "ContractAbi",
    "load_abi",
    "build_model",
    "map_type",
    "normalize_name",
    "resolve_event",
    "GenerateConfig",
    "load_config",
    "GenerationModel",
    "TargetArgument",
    "TargetEvent",
    "generate",
    "generate_source",
]
