"""Generation pipeline: load ABI → build model → render → format → write.

This module provides two layers:

1) `generate_source(...)`:
   - Pure application-layer use case.
   - Takes an already-loaded ABI provider; performs no I/O besides
     template loading and gofmt.

2) `generate(...)` (convenience wrapper):
   - Loads the ABI named by the config, calls `generate_source(...)` and
     writes the result to the configured destination.

Every stage raises on failure; output is written only after the model,
the template and the formatter all succeeded.
"""

from __future__ import annotations

from dataclasses import dataclass

from eventbind.abi_events import load_abi
from eventbind.binding.builder import build_model
from eventbind.core.config import GenerateConfig
from eventbind.core.interfaces import IAbiProvider
from eventbind.core.models import GenerationModel
from eventbind.rendering.renderer import (
    format_go_source,
    gofmt_available,
    render_model,
    write_output,
)


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


@dataclass(kw_only=True)
class GenerateOutput:
    """High-level output of one generation run."""
    model: GenerationModel
    source: str
    output: str
    formatted: bool
    format_skipped: bool = False  # formatting requested but gofmt missing


# ---------------------------------------------------------------------------
# 1) Pure application use case
# ---------------------------------------------------------------------------


def generate_source(*, config: GenerateConfig, abi: IAbiProvider) -> GenerateOutput:
    """Build the model from `abi` and render (and optionally format) it."""
    # 1) Resolve events and map types
    model = build_model(config.package_name, config.events, abi)

    # 2) Template execution
    source = render_model(model, config.template_path, eventdata=config.eventdata)

    # 3) Formatting
    formatted = False
    format_skipped = False
    if config.format_source:
        if gofmt_available():
            source = format_go_source(source)
            formatted = True
        else:
            format_skipped = True

    return GenerateOutput(
        model=model,
        source=source,
        output=config.output,
        formatted=formatted,
        format_skipped=format_skipped,
    )


# ---------------------------------------------------------------------------
# 2) Convenience wrapper (file I/O)
# ---------------------------------------------------------------------------


def generate(*, config: GenerateConfig) -> GenerateOutput:
    """Run the whole pipeline for `config` and write the generated source."""
    abi = load_abi(config.abi_path)
    result = generate_source(config=config, abi=abi)
    write_output(result.source, result.output)
    return result
