"""Template rendering, gofmt formatting and output writing.

The renderer only consumes a finished `GenerationModel`; it never resolves
events or maps types itself.
"""

from __future__ import annotations

import shutil
import subprocess
import sys
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateError,
)

from eventbind.binding.names import normalize_name
from eventbind.constants import DEFAULT_TEMPLATE, EVENTDATA_TYPES, GO_MATH_BIG, GO_TIME, STDOUT
from eventbind.core.errors import FormatError, RenderError
from eventbind.core.models import GenerationModel

GOFMT = "gofmt"


def make_environment(template_path: Path | None = None) -> tuple[Environment, str]:
    """Return a jinja2 environment and the template name to load from it."""
    if template_path is None:
        loader = PackageLoader("eventbind", "rendering/templates")
        name = DEFAULT_TEMPLATE
    else:
        loader = FileSystemLoader(str(template_path.parent))
        name = template_path.name
    env = Environment(
        loader=loader,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.filters["exported"] = normalize_name
    return env, name


def template_imports(model: GenerationModel, *, eventdata: bool = False) -> tuple[str, ...]:
    """Go imports of the model, plus those of the eventdata wrapper when emitted."""
    if not eventdata:
        return model.imports
    return tuple(sorted({*model.imports, GO_MATH_BIG, GO_TIME}))


def render_model(model: GenerationModel, template_path: Path | None = None, *, eventdata: bool = False) -> str:
    """Execute the template (built-in when `template_path` is None) against `model`.

    With `eventdata` the Block / LogInfo / Data[A] wrapper types are emitted
    too, so no event may share their names.
    """
    if eventdata:
        for event in model.events:
            if normalize_name(event.name) in EVENTDATA_TYPES:
                raise RenderError(
                    f"Event {event.name!r} clashes with the eventdata wrapper types {', '.join(EVENTDATA_TYPES)}"
                )

    env, name = make_environment(template_path)
    try:
        template = env.get_template(name)
        return template.render(
            package=model.package_name,
            events=model.events,
            imports=template_imports(model, eventdata=eventdata),
            eventdata=eventdata,
            model=model,
        )
    except TemplateError as e:
        where = str(template_path) if template_path is not None else name
        raise RenderError(f"Error rendering template {where!r}: {e}") from e


def gofmt_available() -> bool:
    return shutil.which(GOFMT) is not None


def format_go_source(source: str) -> str:
    """Pipe `source` through gofmt; raise `FormatError` when it is rejected."""
    try:
        proc = subprocess.run(
            [GOFMT],
            input=source,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise FormatError(f"Failed to run {GOFMT}: {e}") from e
    if proc.returncode != 0:
        raise FormatError(f"Failed to format: {proc.stderr.strip()}")
    return proc.stdout


def write_output(source: str, output: str) -> None:
    """Write to stdout ("-") or to a file, creating parent directories."""
    if output == STDOUT:
        sys.stdout.write(source)
        sys.stdout.flush()
        return
    path = Path(output)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(source)
    except OSError as e:
        raise RenderError(f"Error writing output {output!r}: {e}") from e
