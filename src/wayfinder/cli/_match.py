"""``wayfinder match`` — dry-run the preload plan for one path."""

import argparse
import sys

from wayfinder.cli._manifest import load_or_exit
from wayfinder.preload.engine import PreloadEngine


async def _no_preload(context: object, method: str, params: object) -> tuple[None, None]:
    return None, None


def run_match(args: argparse.Namespace) -> None:
    """Print the matched pattern, its params, and each planned call.

    Exits with status 1 when no pattern matches.
    """
    engine = PreloadEngine(load_or_exit(args.manifest), _no_preload)
    plan = engine.plan(args.path)
    if plan is None:
        print(f"No route matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    print(f"pattern: {plan.route.pattern}")
    params = ", ".join(f"{k}={v}" for k, v in plan.params.items())
    print(f"params:  {params or '-'}")
    if not plan.calls:
        print("calls:   -")
        return

    print("calls:")
    for call in plan.calls:
        call_params = ", ".join(f"{k}={v}" for k, v in (call.params or {}).items())
        marker = "  (unresolved)" if call.unresolved else ""
        print(f"  {call.method}({call_params}){marker}")
