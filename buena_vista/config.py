from __future__ import annotations

import os
import pathlib
from enum import Enum
from functools import reduce
from importlib import import_module
from typing import Annotated, Any, Dict, Iterable, Mapping, cast

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from buena_vista.errors import ConfigurationError

yaml = cast(Any, import_module("yaml"))

SECTION = "truncate"


class WhitespaceMode(str, Enum):
    """Whether segments are whitespace-collapsed before length accounting."""

    NORMALIZE = "normalize"
    PRESERVE = "preserve"


class TruncateOptions(BaseModel):
    """Closed set of truncation options."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    length: Annotated[int, Field(strict=True, gt=0)]
    whitespace: WhitespaceMode = WhitespaceMode.NORMALIZE


class DisplayOptions(TruncateOptions):
    """Truncation options plus the markup settings used by ``html``."""

    block_tag: str | bool = "p"
    more: str | bool | None = " …"
    truncated_text: bool | Dict[str, str] = True


def _describe(exc: ValidationError) -> tuple[str, list[str]]:
    fields = [".".join(str(part) for part in err["loc"]) or "options" for err in exc.errors()]
    details = "; ".join(
        f"{field}: {err['msg']}" for field, err in zip(fields, exc.errors())
    )
    return details, fields


def _validate(model: type[TruncateOptions], data: Mapping[str, Any]) -> TruncateOptions:
    if "length" not in data:
        raise ConfigurationError("Please specify a length option", ["length"])
    try:
        return model.model_validate(dict(data))
    except ValidationError as exc:
        details, fields = _describe(exc)
        raise ConfigurationError(f"Invalid truncation options: {details}", fields) from exc


def coerce_options(
    options: TruncateOptions | Mapping[str, Any] | None,
    model: type[TruncateOptions] = TruncateOptions,
) -> TruncateOptions:
    """Return ``options`` as a validated ``model`` instance."""
    if isinstance(options, model):
        return options
    if isinstance(options, TruncateOptions):
        return _validate(model, options.model_dump())
    if options is not None and not isinstance(options, Mapping):
        raise ConfigurationError(
            f"Options must be a mapping, got {type(options).__name__}", ["options"]
        )
    return _validate(model, options or {})


def _read_yaml(path: str | os.PathLike | None) -> Dict[str, Any]:
    """Return a dict from YAML or {} if path is None/missing/empty."""
    if not path:
        return {}
    p = pathlib.Path(path)
    if not p.exists():
        return {}
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{p} must contain a top-level mapping", ["config"])
    section = data.get(SECTION, {}) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"{p}: '{SECTION}' must be a mapping", [SECTION])
    return section


def _env_overrides(environ: Mapping[str, str] | None = None) -> Dict[str, Any]:
    """
    Map TRUNCATE__key=value → options[key]=value (key lower-cased).
    Values are YAML-coerced (so '42' becomes an int, 'preserve' stays a string).
    """
    env = os.environ if environ is None else environ
    prefix = f"{SECTION.upper()}__"
    out: Dict[str, Any] = {}
    for k, v in env.items():
        if not k.upper().startswith(prefix):
            continue
        key = k[len(prefix):].lower()
        try:
            val = yaml.safe_load(v)
        except yaml.YAMLError:
            val = v
        out[key] = val
    return out


def load_options(
    path: str | os.PathLike | None = "buena_vista.yaml",
    overrides: Mapping[str, Any] | None = None,
    model: type[TruncateOptions] = TruncateOptions,
) -> TruncateOptions:
    """Load YAML + env/CLI overrides into a validated ``model`` instance."""
    sources: Iterable[Mapping[str, Any]] = (
        d for d in (_read_yaml(path), _env_overrides(), overrides) if d
    )
    acc: Dict[str, Any] = {}
    merged = reduce(lambda base, extra: {**base, **extra}, sources, acc)
    return coerce_options(merged, model)


__all__ = [
    "DisplayOptions",
    "TruncateOptions",
    "WhitespaceMode",
    "coerce_options",
    "load_options",
]
