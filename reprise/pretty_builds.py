"""Human-readable terminal output for builds."""

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

_MAX_RULE_WIDTH = 120
_PREVIEW_CHARS = 60


def _timestamp(value: datetime) -> str:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%d %H:%M:%S UTC")


def _first_line_preview(message: str) -> str:
    first = message.split("\n", 1)[0]
    if first.endswith("\r"):
        first = first[:-1]
    return first_n_chars(first, _PREVIEW_CHARS)


def format_builds(builds: Sequence[Any]) -> str:
    """Render a list of builds, one compact block per build."""
    if not builds:
        return "No builds found."

    parts = [
        style("Builds", "bold") + "\n",
        rule(min(terminal_width(), _MAX_RULE_WIDTH)) + "\n",
    ]
    for build in builds:
        label, styles = _LIST_STATUS.get(build.status, _LIST_UNKNOWN)
        number = style(str(build.build_number).ljust(6), "bold")
        status = style(label.ljust(12), *styles)
        parts.append(
            f"#{number} {status} {build.branch} "
            f"{style(build.triggered_workflow, 'dimmed')} "
            f"{style(build.duration_display(), 'dimmed')}\n"
        )

        parts.append(f"        {style('Slug:', 'cyan')} {build.slug}")
        if build.pull_request_id is not None:
            parts.append(f"  {style('PR', 'magenta')}#{build.pull_request_id}")
        if build.tag is not None:
            parts.append(f"  {style('Tag:', 'cyan')}{build.tag}")
        parts.append("\n")

        if build.triggered_by is not None:
            parts.append(
                f"        {style('By:', 'cyan')} {style(build.triggered_by, 'dimmed')}\n"
            )

        if build.is_failed():
            if build.commit_message is not None:
                preview = _first_line_preview(build.commit_message)
                parts.append(f"        {style(preview, 'dimmed')}\n")
            if build.abort_reason is not None:
                parts.append(
                    f"        {style('Reason:', 'red')} {style(build.abort_reason, 'red')}\n"
                )
    return "".join(parts)


def format_build(build: Any) -> str:
    """Render the details of a single build, ending with its web URL."""
    label, styles = _DETAIL_STATUS.get(build.status, _DETAIL_UNKNOWN)
    parts = [
        f"Build #{style(str(build.build_number), 'bold')} {style(label, *styles)}\n",
        rule(60) + "\n",
        f"{style('Slug:', 'cyan')} {build.slug}\n",
        f"{style('Branch:', 'cyan')} {build.branch}\n",
        f"{style('Workflow:', 'cyan')} {build.triggered_workflow}\n",
        f"{style('Duration:', 'cyan')} {build.duration_display()}\n",
    ]

    if build.tag is not None:
        parts.append(f"{style('Tag:', 'cyan')} {build.tag}\n")
    if build.commit_hash is not None:
        parts.append(f"{style('Commit:', 'cyan')} {first_n_chars(build.commit_hash, 7)}\n")
    if build.commit_message is not None:
        parts.append(
            f"{style('Message:', 'cyan')} {_first_line_preview(build.commit_message)}\n"
        )

    if build.pull_request_id is not None:
        parts.append(f"{style('PR:', 'magenta')} #{build.pull_request_id}")
        if build.pull_request_target_branch is not None:
            parts.append(f" → {build.pull_request_target_branch}")
        parts.append("\n")

    parts.append(f"\n{style('Triggered:', 'cyan')} {_timestamp(build.triggered_at)}\n")
    if build.started_on_worker_at is not None:
        parts.append(
            f"{style('Started:', 'cyan')} {_timestamp(build.started_on_worker_at)}\n"
        )
    if build.finished_at is not None:
        parts.append(f"{style('Finished:', 'cyan')} {_timestamp(build.finished_at)}\n")
    if build.triggered_by is not None:
        parts.append(f"{style('Triggered by:', 'cyan')} {build.triggered_by}\n")

    if build.stack_identifier is not None:
        parts.append(f"{style('Stack:', 'cyan')} {build.stack_identifier}\n")
    if build.machine_type_id is not None:
        parts.append(f"{style('Machine:', 'cyan')} {build.machine_type_id}\n")
    if build.credit_cost is not None:
        parts.append(f"{style('Credits:', 'cyan')} {build.credit_cost}\n")

    if build.abort_reason is not None:
        parts.append(f"\n{style('Abort Reason:', 'red', 'bold')} {build.abort_reason}\n")

    parts.append(f"\n{style('URL:', 'cyan')} https://app.bitrise.io/build/{build.slug}\n")
    return "".join(parts)