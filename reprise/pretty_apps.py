"""Human-readable terminal output for apps and build artifacts."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from reprise.textutil import rule, style


def _status_label(app: Any) -> str:
    return style("disabled", "red") if app.is_disabled else style("active", "green")


def format_apps(apps: Sequence[Any]) -> str:
    """Render a list of apps, one block per app with its slug shown for copying."""
    if not apps:
        return "No apps found."

    lines = [style("Apps", "bold"), rule(70)]
    for app in apps:
        lines.append(f"{style(app.title, 'bold')} [{_status_label(app)}]")
        lines.append(f"  {style('Slug:', 'cyan')} {app.slug}")
        lines.append(f"  {style('Owner:', 'cyan')} {app.owner.name}")
        if app.project_type is not None:
            lines.append(f"  {style('Type:', 'cyan')} {app.project_type}")
        if app.repo_url is not None:
            lines.append(f"  {style('Repo:', 'cyan')} {style(app.repo_url, 'dimmed')}")
        lines.append("")
    return "\n".join(lines) + "\n"


def format_app(app: Any) -> str:
    """Render the details of a single app, ending with its web URL."""
    lines = [
        f"{style(app.title, 'bold')} [{_status_label(app)}]",
        rule(50),
        f"{style('Slug:', 'cyan')} {app.slug}",
        f"{style('Owner:', 'cyan')} {app.owner.name} ({app.owner.account_type})",
    ]
    if app.project_type is not None:
        lines.append(f"{style('Type:', 'cyan')} {app.project_type}")
    if app.provider is not None:
        lines.append(f"{style('Provider:', 'cyan')} {app.provider}")
    if app.repo_url is not None:
        lines.append(f"{style('Repo:', 'cyan')} {app.repo_url}")

    visibility = "public" if app.is_public else "private"
    lines.append(f"{style('Visibility:', 'cyan')} {visibility}")
    lines.append("")
    lines.append(f"{style('URL:', 'cyan')} https://app.bitrise.io/app/{app.slug}")
    return "\n".join(lines) + "\n"


def format_artifacts(artifacts: Sequence[Any]) -> str:
    """Render the artifacts of a build with a count header."""
    if not artifacts:
        return "No artifacts found."

    count = len(artifacts)
    plural = "" if count == 1 else "s"
    parts = [
        f"{style('Build Artifacts', 'bold')} ({count} artifact{plural})\n",
        rule(60),
        "\n\n",
    ]
    for artifact in artifacts:
        parts.append(f"  {style('•', 'cyan')} {style(artifact.title, 'bold')}\n")
        parts.append(f"    {style('Slug:', 'cyan')} {artifact.slug}\n")
        parts.append(f"    {style('Size:', 'cyan')} {artifact.size_display()}\n")
        if artifact.artifact_type is not None:
            parts.append(f"    {style('Type:', 'cyan')} {artifact.artifact_type}\n")
        if artifact.is_public_page_enabled:
            parts.append(f"    {style('Public:', 'cyan')} {style('yes', 'green')}\n")
            if artifact.public_install_page_url is not None:
                parts.append(
                    f"    {style('Install URL:', 'cyan')} {artifact.public_install_page_url}\n"
                )
        parts.append("\n")
    return "".join(parts).rstrip()