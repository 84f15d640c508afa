"""Entry point for `python -m kubefilter`.

Usage:
    python -m kubefilter match events.jsonl --type Warning
"""

from __future__ import annotations

from kubefilter.cli import cli

cli()
