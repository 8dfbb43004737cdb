"""Route preload declarations and the JSON manifest that carries them.

A manifest lists, per route pattern, the sub-calls worth executing on the
server before the page is sent::

    {
      "routes": [
        {"pattern": "/", "rpcs": [{"method": "GetItems"}]},
        {"pattern": "/users/:id", "rpcs": [
          {"method": "GetUser", "params": {"userId": ":id"}}
        ]}
      ]
    }

Order matters: the linear matcher picks the first matching pattern.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from wayfinder.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RpcSpec:
    """A sub-call to preload. Param values may contain ``:name`` tokens."""

    method: str
    params: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        if self.params is not None:
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))


@dataclass(frozen=True, slots=True)
class RouteSpec:
    """A route pattern and the sub-calls declared for it."""

    pattern: str
    rpcs: tuple[RpcSpec, ...] = field(default=())


def _parse_rpc(raw: Any, where: str) -> RpcSpec:
    if not isinstance(raw, dict):
        msg = f"{where}: expected an object, got {type(raw).__name__}"
        raise ConfigurationError(msg)

    method = raw.get("method")
    if not isinstance(method, str) or not method:
        msg = f"{where}: 'method' must be a non-empty string"
        raise ConfigurationError(msg)

    params = raw.get("params")
    if params is not None:
        if not isinstance(params, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in params.items()
        ):
            msg = f"{where}: 'params' must map strings to strings"
            raise ConfigurationError(msg)

    return RpcSpec(method=method, params=params)


def parse_route_specs(data: Any) -> list[RouteSpec]:
    """Build route specs from a decoded manifest.

    Accepts either ``{"routes": [...]}`` or the bare list.
    Raises ``ConfigurationError`` on malformed input.
    """
    if isinstance(data, dict):
        if "routes" not in data:
            msg = "Manifest object must have a 'routes' key"
            raise ConfigurationError(msg)
        data = data["routes"]

    if not isinstance(data, list):
        msg = f"Manifest routes must be a list, got {type(data).__name__}"
        raise ConfigurationError(msg)

    specs: list[RouteSpec] = []
    for i, raw in enumerate(data):
        where = f"routes[{i}]"
        if not isinstance(raw, dict):
            msg = f"{where}: expected an object, got {type(raw).__name__}"
            raise ConfigurationError(msg)

        pattern = raw.get("pattern")
        if not isinstance(pattern, str) or not pattern.startswith("/"):
            msg = f"{where}: 'pattern' must be a string starting with '/'"
            raise ConfigurationError(msg)

        rpcs = raw.get("rpcs", [])
        if not isinstance(rpcs, list):
            msg = f"{where}: 'rpcs' must be a list"
            raise ConfigurationError(msg)

        specs.append(
            RouteSpec(
                pattern=pattern,
                rpcs=tuple(_parse_rpc(rpc, f"{where}.rpcs[{j}]") for j, rpc in enumerate(rpcs)),
            )
        )
    return specs


def load_route_specs(path: str | Path) -> list[RouteSpec]:
    """Read and parse a JSON manifest from *path*.

    Raises ``ConfigurationError`` if the file is unreadable, is not valid
    JSON, or does not describe a route list.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read preload manifest {str(path)!r}: {exc}"
        raise ConfigurationError(msg) from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in preload manifest {str(path)!r}: {exc}"
        raise ConfigurationError(msg) from exc

    return parse_route_specs(data)
