"""Desktop notifications for build events."""

from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass
from typing import Any

APP_NAME = "reprise"

_COMPLETION = {
    1: ("Build Succeeded", "dialog-positive"),
    2: ("Build Failed", "dialog-error"),
    3: ("Build Aborted", "dialog-warning"),
}
_COMPLETION_DEFAULT = ("Build Completed", "dialog-information")


@dataclass(frozen=True)
class Notification:
    """A desktop notification ready to be shown."""

    summary: str
    body: str
    icon: str
    timeout_ms: int
    appname: str = APP_NAME


def completion_message(build: Any, app_name: str | None = None) -> Notification:
    """Build the notification shown when a build finishes."""
    title, icon = _COMPLETION.get(build.status, _COMPLETION_DEFAULT)
    app_display = app_name if app_name is not None else "Bitrise"
    summary = f"{app_display} - #{build.build_number}"
    body = (
        f"Workflow: {build.triggered_workflow}\n"
        f"Branch: {build.branch}\n"
        f"Duration: {build.duration_display()}"
    )
    return Notification(summary=f"{title}: {summary}", body=body, icon=icon, timeout_ms=5000)


def trigger_message(build: Any, app_name: str | None = None) -> Notification:
    """Build the notification shown when a build is triggered."""
    app_display = app_name if app_name is not None else "Bitrise"
    body = (
        f"Build #{build.build_number}\n"
        f"Workflow: {build.triggered_workflow}\n"
        f"Branch: {build.branch}"
    )
    return Notification(
        summary=f"Build Triggered - {app_display}",
        body=body,
        icon="media-playback-start",
        timeout_ms=3000,
    )


def _applescript_quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _command(notification: Notification) -> list[str] | None:
    if sys.platform == "darwin":
        if shutil.which("osascript") is None:
            return None
        script = (
            f"display notification {_applescript_quote(notification.body)} "
            f"with title {_applescript_quote(notification.summary)}"
        )
        return ["osascript", "-e", script]
    if shutil.which("notify-send") is None:
        return None
    return [
        "notify-send",
        "-a",
        notification.appname,
        "-i",
        notification.icon,
        "-t",
        str(notification.timeout_ms),
        notification.summary,
        notification.body,
    ]


def _show(notification: Notification) -> bool:
    """Display a notification; failures are ignored. Returns whether it was sent."""
    command = _command(notification)
    if command is None:
        return False
    try:
        completed = subprocess.run(
            command,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except (OSError, subprocess.SubprocessError):
        return False
    return completed.returncode == 0


def build_completed(build: Any, app_name: str | None = None) -> bool:
    """Notify that a build has finished. Returns whether the notification was sent."""
    return _show(completion_message(build, app_name))


def build_triggered(build: Any, app_name: str | None = None) -> bool:
    """Notify that a build was triggered. Returns whether the notification was sent."""
    return _show(trigger_message(build, app_name))