"""Manifest loading shared by the CLI commands."""

import sys

from wayfinder.errors import ConfigurationError
from wayfinder.preload.spec import RouteSpec, load_route_specs


def load_or_exit(path: str) -> list[RouteSpec]:
    """Load the manifest at *path*, exiting with status 1 on error."""
    try:
        return load_route_specs(path)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
