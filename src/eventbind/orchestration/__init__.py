"""Orchestration of a binding generation run.

This package provides:
- `generate_source`: model building + rendering against an injected ABI
- `generate`: the full pipeline, ABI loading and output writing included
"""

from eventbind.orchestration.orchestrator import GenerateOutput, generate, generate_source

__all__ = [
    "GenerateOutput",
    "generate",
    "generate_source",
]
