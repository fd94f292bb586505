"""CLI modules for computing a linkage and serving the HTTP API.

Note: avoid importing submodules at import-time. This keeps `python -m fourbar.cli.<cmd>`
free of `runpy` warnings and avoids pulling in FastAPI for a one-off computation.
"""

from __future__ import annotations


def compute_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `fourbar.cli.compute.main`."""

    from .compute import main

    return main(argv)


def serve_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `fourbar.cli.serve.main`."""

    from .serve import main

    return main(argv)


__all__ = ["compute_main", "serve_main"]
