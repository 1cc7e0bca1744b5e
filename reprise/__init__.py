"""Terminal and JSON formatting of Bitrise apps, builds, pipelines and artifacts, with desktop notifications."""

__version__ = "0.1.5"