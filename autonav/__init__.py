"""Public package surface for autonav.

Exports ``main`` for programmatic CLI invocation.
The engine lives in submodules: ``sync`` for one pass, ``app`` for the
long-running navigator, ``store`` for store collaborators.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
