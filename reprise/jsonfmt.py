"""Pretty-printed JSON output for apps, builds, pipelines and artifacts."""

from __future__ import annotations

import dataclasses
import enum
import json
from collections.abc import Iterable, Mapping
from datetime import date, datetime, timedelta, timezone
from typing import Any


def _encode_datetime(value: datetime) -> str:
    if value.tzinfo is not None and value.utcoffset() == timedelta(0):
        text = value.astimezone(timezone.utc).replace(tzinfo=None).isoformat()
        return text + "Z"
    return value.isoformat()


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, datetime):
        return _encode_datetime(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, Mapping):
        return dict(obj)
    if isinstance(obj, (set, frozenset, tuple)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def format_json(value: Any) -> str:
    """Serialize ``value`` as indented JSON; raises ``TypeError`` if it cannot."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=_default)


def _format_many(items: Iterable[Any]) -> str:
    return format_json(list(items))


def format_apps(apps: Iterable[Any]) -> str:
    """Format a list of apps as JSON."""
    return _format_many(apps)


def format_app(app: Any) -> str:
    """Format a single app as JSON."""
    return format_json(app)


def format_builds(builds: Iterable[Any]) -> str:
    """Format a list of builds as JSON."""
    return _format_many(builds)


def format_build(build: Any) -> str:
    """Format a single build as JSON."""
    return format_json(build)


def format_pipelines(pipelines: Iterable[Any]) -> str:
    """Format a list of pipelines as JSON."""
    return _format_many(pipelines)


def format_pipeline(pipeline: Any) -> str:
    """Format a single pipeline as JSON."""
    return format_json(pipeline)


def format_artifacts(artifacts: Iterable[Any]) -> str:
    """Format a list of artifacts as JSON."""
    return _format_many(artifacts)