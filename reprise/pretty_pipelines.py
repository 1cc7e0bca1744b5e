"""Human-readable terminal output for pipelines."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from reprise.textutil import first_n_chars, rule, style, terminal_width

_LIST_STATUS = {
    0: ("running", ("yellow", "bold")),
    1: ("success", ("green",)),
    2: ("failed", ("red", "bold")),
    3: ("aborted", ("red",)),
}
_LIST_UNKNOWN = ("unknown", ("dimmed",))

_DETAIL_STATUS = {
    0: ("RUNNING", ("yellow", "bold")),
    1: ("SUCCESS", ("green", "bold")),
    2: ("FAILED", ("red", "bold")),
    3: ("ABORTED", ("red",)),
}
_DETAIL_UNKNOWN = ("UNKNOWN", ("dimmed",))

_WORKFLOW_SYMBOLS = {
    0: ("●", "yellow"),
    1: ("✓", "green"),
    2: ("✗", "red"),
    3: ("○", "dimmed"),
}
_WORKFLOW_UNKNOWN = ("?", "dimmed")

_MAX_RULE_WIDTH = 120
_SHORT_ID_CHARS = 8
_INDENT = " " * 11


def _timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d %H:%M:%S UTC")


def format_pipelines(pipelines: Sequence[Any]) -> str:
    """Render a list of pipelines, one compact block per pipeline."""
    if not pipelines:
        return "No pipelines found."

    parts = [
        style("Pipelines", "bold") + "\n",
        rule(min(terminal_width(), _MAX_RULE_WIDTH)) + "\n",
    ]
    for pipeline in pipelines:
        label, styles = _LIST_STATUS.get(pipeline.status, _LIST_UNKNOWN)
        id_display = style(first_n_chars(pipeline.id, _SHORT_ID_CHARS).ljust(10), "bold")
        status = style(label.ljust(12), *styles)
        branch = pipeline.get_branch()
        duration = style(pipeline.duration_display(), "dimmed")
        if pipeline.pipeline_id:
            parts.append(
                f"{id_display} {status} {branch} "
                f"{style(pipeline.pipeline_id, 'dimmed')} {duration}\n"
            )
        else:
            parts.append(f"{id_display} {status} {branch} {duration}\n")

        parts.append(f"{_INDENT}{style('ID:', 'cyan')} {pipeline.id}")
        if pipeline.triggered_by is not None:
            parts.append(
                f"  {style('By:', 'cyan')} {style(pipeline.triggered_by, 'dimmed')}"
            )
        parts.append("\n")

        if pipeline.is_running() or pipeline.is_failed():
            for workflow in pipeline.workflows:
                symbol, color = _WORKFLOW_SYMBOLS.get(workflow.status, _WORKFLOW_UNKNOWN)
                parts.append(f"{_INDENT}{style(symbol, color)} {workflow.name}\n")
    return "".join(parts)


def format_pipeline(pipeline: Any) -> str:
    """Render the details of a single pipeline, including its workflows."""
    label, styles = _DETAIL_STATUS.get(pipeline.status, _DETAIL_UNKNOWN)
    short_id = first_n_chars(pipeline.id, _SHORT_ID_CHARS)
    parts = [
        f"Pipeline {style(short_id, 'bold')} {style(label, *styles)}\n",
        rule(60) + "\n",
        f"{style('ID:', 'cyan')} {pipeline.id}\n",
    ]
    if pipeline.pipeline_id:
        parts.append(f"{style('Pipeline:', 'cyan')} {pipeline.pipeline_id}\n")
    branch = pipeline.get_branch()
    if branch:
        parts.append(f"{style('Branch:', 'cyan')} {branch}\n")
    parts.append(f"{style('Duration:', 'cyan')} {pipeline.duration_display()}\n")

    app_slug = pipeline.get_app_slug()
    if app_slug:
        parts.append(f"{style('App:', 'cyan')} {app_slug}\n")

    if pipeline.triggered_at is not None:
        parts.append(f"\n{style('Triggered:', 'cyan')} {_timestamp(pipeline.triggered_at)}\n")
    if pipeline.started_at is not None:
        parts.append(f"{style('Started:', 'cyan')} {_timestamp(pipeline.started_at)}\n")
    if pipeline.finished_at is not None:
        parts.append(f"{style('Finished:', 'cyan')} {_timestamp(pipeline.finished_at)}\n")
    if pipeline.triggered_by is not None:
        parts.append(f"{style('Triggered by:', 'cyan')} {pipeline.triggered_by}\n")

    if pipeline.workflows:
        parts.append(f"\n{style('Workflows', 'bold')}\n")
        parts.append(rule(40) + "\n")
        for workflow in pipeline.workflows:
            wf_label, wf_styles = _LIST_STATUS.get(workflow.status, _LIST_UNKNOWN)
            parts.append(f"  {workflow.name} {style(wf_label.ljust(12), *wf_styles)}\n")

    if pipeline.abort_reason is not None:
        parts.append(f"\n{style('Abort Reason:', 'red', 'bold')} {pipeline.abort_reason}\n")

    if app_slug:
        parts.append(
            f"\n{style('URL:', 'cyan')} "
            f"https://app.bitrise.io/app/{app_slug}/pipelines/{pipeline.id}\n"
        )
    return "".join(parts)