"""``wayfinder routes`` — list routes declared in a preload manifest.

Prints one row per route, in declaration order (the order the linear
matcher tries them), with the sub-call methods declared for it.
"""

import argparse

from wayfinder.cli._manifest import load_or_exit


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATTERN and CALLS for ``args.manifest``."""
    specs = load_or_exit(args.manifest)
    if not specs:
        print("No routes declared.")
        return

    rows = [(spec.pattern, ", ".join(rpc.method for rpc in spec.rpcs) or "-") for spec in specs]

    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_pattern}}}  {{}}"
    print(fmt.format("PATTERN", "CALLS"))
    sep_len = max_pattern + 2 + max(len(r[1]) for r in rows)
    print("-" * min(max(sep_len, 14), 80))
    for pattern, calls in rows:
        print(fmt.format(pattern, calls))
