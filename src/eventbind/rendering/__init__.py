"""Rendering of the generation model into Go source.

This package provides:
- jinja2 template execution (built-in `events.go.j2` or a custom file)
- gofmt formatting
- Output writing (file or stdout)
"""

from eventbind.rendering.renderer import (
    format_go_source,
    gofmt_available,
    make_environment,
    render_model,
    write_output,
)

__all__ = [
    "format_go_source",
    "gofmt_available",
    "make_environment",
    "render_model",
    "write_output",
]
