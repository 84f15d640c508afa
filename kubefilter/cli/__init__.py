"""kubefilter command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``kubefilter`` script).
"""

from kubefilter.cli.main import cli

__all__ = ["cli"]
