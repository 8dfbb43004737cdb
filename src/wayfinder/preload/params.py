"""Substitution of ``:name`` placeholders in sub-call parameters.

Declared sub-call params may reference route parameters::

    substitute_params({"postId": ":id"}, {"id": "42"})   # {"postId": "42"}

Replacement is plain substring replacement, so a token inside a longer
value is replaced too (``":id-comments"`` -> ``"42-comments"``).

After substitution, any value still containing ``:`` is treated as
referencing an unavailable parameter and the sub-call is skipped. A
literal colon (e.g. a time like ``"10:30"``) trips this as well.
"""

import re
from collections.abc import Mapping


def substitute_params(
    declared: Mapping[str, str] | None,
    route_params: Mapping[str, str],
) -> dict[str, str] | None:
    """Replace ``:name`` tokens in every declared value.

    Returns None when *declared* is None (the sub-call takes no params).
    """
    if declared is None:
        return None
    if not route_params:
        return dict(declared)

    # One pass over the declared text, so substituted values are never rescanned.
    # Longest names first, so ":idx" is not clobbered by ":id".
    names = sorted(route_params, key=len, reverse=True)
    token = re.compile(":(" + "|".join(map(re.escape, names)) + ")")
    return {
        key: token.sub(lambda m: route_params[m.group(1)], value)
        for key, value in declared.items()
    }


def has_unsubstituted_param(params: Mapping[str, str] | None) -> bool:
    """True if any value still contains a ``:``."""
    if not params:
        return False
    return any(":" in value for value in params.values())
