"""Choose between pretty and JSON rendering of API objects."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence
from typing import Any

from reprise import jsonfmt, pretty_apps, pretty_builds, pretty_pipelines


class OutputFormat(enum.Enum):
    """How command results are rendered."""

    PRETTY = "pretty"
    JSON = "json"


def _render(
    value: Any,
    output_format: OutputFormat | str,
    pretty: Callable[[Any], str],
    as_json: Callable[[Any], str],
) -> str:
    fmt = OutputFormat(output_format)
    if fmt is OutputFormat.PRETTY:
        return pretty(value)
    return as_json(value)


def format_apps(apps: Sequence[Any], output_format: OutputFormat | str) -> str:
    """Format a list of apps."""
    return _render(apps, output_format, pretty_apps.format_apps, jsonfmt.format_apps)


def format_app(app: Any, output_format: OutputFormat | str) -> str:
    """Format a single app."""
    return _render(app, output_format, pretty_apps.format_app, jsonfmt.format_app)


def format_builds(builds: Sequence[Any], output_format: OutputFormat | str) -> str:
    """Format a list of builds."""
    return _render(builds, output_format, pretty_builds.format_builds, jsonfmt.format_builds)


def format_build(build: Any, output_format: OutputFormat | str) -> str:
    """Format a single build."""
    return _render(build, output_format, pretty_builds.format_build, jsonfmt.format_build)


def format_pipelines(pipelines: Sequence[Any], output_format: OutputFormat | str) -> str:
    """Format a list of pipelines."""
    return _render(
        pipelines, output_format, pretty_pipelines.format_pipelines, jsonfmt.format_pipelines
    )


def format_pipeline(pipeline: Any, output_format: OutputFormat | str) -> str:
    """Format a single pipeline."""
    return _render(
        pipeline, output_format, pretty_pipelines.format_pipeline, jsonfmt.format_pipeline
    )


def format_artifacts(artifacts: Sequence[Any], output_format: OutputFormat | str) -> str:
    """Format a list of artifacts."""
    return _render(
        artifacts, output_format, pretty_apps.format_artifacts, jsonfmt.format_artifacts
    )