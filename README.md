# reprise

Rendering helpers for Bitrise CI data: apps, builds, pipelines and build
artifacts, shown either as coloured terminal text or as pretty-printed JSON.
A small notification module announces when a build is triggered or finishes.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Choose an output format and pass the records you have fetched from the API:

```python
from reprise.output import OutputFormat, format_builds, format_build

print(format_builds(builds, OutputFormat.PRETTY))
print(format_build(build, OutputFormat.JSON))
```

`OutputFormat` has two members, `PRETTY` and `JSON`; the strings `"pretty"`
and `"json"` are accepted as well, and any other value raises `ValueError`.

`reprise.output` also provides `format_apps`, `format_app`,
`format_pipelines`, `format_pipeline` and `format_artifacts`, each taking the
records and an output format. Empty lists render as `No apps found.`,
`No builds found.` and so on in pretty mode, and as `[]` in JSON mode.

The lower-level modules can be used directly:

- `reprise.jsonfmt`: JSON output with two-space indentation. `format_json`
  serializes dataclasses, datetimes (UTC ones with a trailing `Z`), enums,
  mappings, sets and tuples; anything else it cannot handle raises
  `TypeError`. The `format_*` helpers wrap it.
- `reprise.pretty_apps` (`format_apps`, `format_app`, `format_artifacts`),
  `reprise.pretty_builds` (`format_builds`, `format_build`) and
  `reprise.pretty_pipelines` (`format_pipelines`, `format_pipeline`):
  terminal output with headers, rules, status colours and links to
  `app.bitrise.io`.
- `reprise.textutil`: `truncate_str`, `fit_str`, `first_n_chars`,
  `terminal_width` (100 when no terminal is attached), `rule` and the ANSI
  `style` helper.

### Records

The package defines no record types of its own. The pretty formatters read
attributes from whatever objects you pass, for example `build.build_number`,
`build.status`, `build.branch` and the methods `build.duration_display()` and
`build.is_failed()`; pipelines need `get_branch()`, `get_app_slug()`,
`duration_display()`, `is_running()` and `is_failed()`, and artifacts need
`size_display()`. Status codes are 0 running, 1 success, 2 failed and
3 aborted. For JSON output, dataclasses work directly.

### Colours

Output is coloured with ANSI escapes when stdout is a terminal and the
`NO_COLOR` environment variable is not set. Force colours on or off with
`reprise.textutil.set_color_enabled(True)` or `set_color_enabled(False)`;
`set_color_enabled(None)` returns to detection. `color_enabled()` reports the
current choice.

### Notifications

```python
from reprise.notify import build_completed, completion_message

note = completion_message(build, "My App")
print(note.summary, note.body, note.icon, note.timeout_ms)
sent = build_completed(build, "My App")
```

`completion_message` and `trigger_message` return a `Notification` with a
summary, body, icon and timeout. `build_completed` and `build_triggered` show
it through `osascript` on macOS or `notify-send` elsewhere, and return whether
it was sent. If no notifier is available, or it fails, they return `False`
and raise nothing.

## What this package does not do

It only formats and announces data you already have. It has no API client
for fetching apps, builds, logs or pipelines, no configuration file handling,
and no command-line tool.