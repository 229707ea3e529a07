from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from eventbind.constants import DEFAULT_PACKAGE_NAME, STDOUT
from eventbind.core.errors import ConfigurationError


class ConfigFile(BaseModel):
    """On-disk configuration (YAML or JSON)."""

    model_config = ConfigDict(extra="forbid")

    abi: str
    events: list[str] = Field(min_length=1)
    package: str = DEFAULT_PACKAGE_NAME
    template: str | None = None
    eventdata: bool = False


@dataclass(frozen=True)
class GenerateConfig:
    """Configuration for one binding generation run."""

    abi_path: Path
    events: tuple[str, ...]
    package_name: str = DEFAULT_PACKAGE_NAME
    template_path: Path | None = None  # None: built-in template
    output: str = STDOUT  # file path or "-" for stdout
    format_source: bool = True
    eventdata: bool = False  # also emit the Block / LogInfo / Data[A] wrappers

    def with_overrides(
        self,
        *,
        package_name: str | None = None,
        template_path: Path | None = None,
        output: str | None = None,
        format_source: bool | None = None,
        eventdata: bool | None = None,
    ) -> GenerateConfig:
        """Return a copy with the non-None CLI overrides applied."""
        changes: dict[str, object] = {}
        if package_name is not None:
            changes["package_name"] = package_name
        if template_path is not None:
            changes["template_path"] = template_path
        if output is not None:
            changes["output"] = output
        if format_source is not None:
            changes["format_source"] = format_source
        if eventdata is not None:
            changes["eventdata"] = eventdata
        return replace(self, **changes)


def load_config(path: Path) -> GenerateConfig:
    """Read a YAML/JSON config file; relative paths resolve against its directory."""
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Error opening config file: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing config file: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {str(path)!r} must contain a mapping")

    try:
        parsed = ConfigFile.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid config file {str(path)!r}: {e}") from e

    base = path.parent
    return GenerateConfig(
        abi_path=base / parsed.abi,
        events=tuple(parsed.events),
        package_name=parsed.package,
        template_path=base / parsed.template if parsed.template else None,
        eventdata=parsed.eventdata,
    )
