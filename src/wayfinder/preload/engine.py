"""Preload engine: run the sub-calls a request path needs, concurrently.

The engine owns no transport. The application passes an async
``preload`` callable that actually performs one sub-call::

    async def preload(context, method, params):
        request = build_request(method, params)
        return request, await rpc_server.call(context, method, request)

    engine = PreloadEngine(load_route_specs("preload.json"), preload)
    results = await engine.execute_for_path("/users/42", context=request)
    # {"GetUser": PreloadedCall(request=..., response=...)}

Concurrency:
    - One linear match, then every resolved sub-call in its own task
    - Results land in a dict guarded by an ``anyio.Lock``
    - Task group exit is the wait barrier; the whole fan-out is bounded by
      ``PreloadConfig.timeout`` and whatever finished by then is returned
"""

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import anyio

from wayfinder.config import PreloadConfig
from wayfinder.preload.matcher import match_route
from wayfinder.preload.params import has_unsubstituted_param, substitute_params
from wayfinder.preload.spec import RouteSpec

logger = logging.getLogger("wayfinder.preload")

# (context, method, params) -> (request, response)
type PreloadFunc = Callable[[Any, str, Mapping[str, str] | None], Awaitable[tuple[Any, Any]]]


@dataclass(frozen=True, slots=True)
class PreloadedCall:
    """The request and response of one executed sub-call. Opaque to the engine."""

    request: Any
    response: Any


@dataclass(frozen=True, slots=True)
class PlannedCall:
    """A declared sub-call with route parameters substituted."""

    method: str
    params: Mapping[str, str] | None
    unresolved: bool = False


@dataclass(frozen=True, slots=True)
class PreloadPlan:
    """What ``execute_for_path`` would run for one path."""

    route: RouteSpec
    params: Mapping[str, str]
    calls: tuple[PlannedCall, ...]

    @property
    def runnable(self) -> tuple[PlannedCall, ...]:
        return tuple(call for call in self.calls if not call.unresolved)


class PreloadEngine:
    """Matches request paths to declared sub-calls and executes them."""

    __slots__ = ("_config", "_preload", "_routes")

    def __init__(
        self,
        routes: Sequence[RouteSpec],
        preload: PreloadFunc,
        config: PreloadConfig | None = None,
    ) -> None:
        self._routes = tuple(routes)
        self._preload = preload
        self._config = config or PreloadConfig()

    @property
    def routes(self) -> tuple[RouteSpec, ...]:
        return self._routes

    @property
    def config(self) -> PreloadConfig:
        return self._config

    def should_preload(self, path: str) -> bool:
        """False for asset, transport and dev-endpoint paths."""
        return not path.startswith(self._config.reserved_prefixes)

    def plan(self, path: str) -> PreloadPlan | None:
        """Match *path* and substitute params into its declared sub-calls.

        Pure: performs no calls. Returns None when no pattern matches.
        """
        matched = match_route(self._routes, path)
        if matched is None:
            return None

        route, params = matched
        calls = []
        for rpc in route.rpcs:
            substituted = substitute_params(rpc.params, params)
            calls.append(
                PlannedCall(
                    method=rpc.method,
                    params=substituted,
                    unresolved=has_unsubstituted_param(substituted),
                )
            )
        return PreloadPlan(route=route, params=params, calls=tuple(calls))

    async def execute_for_path(self, path: str, context: Any = None) -> dict[str, PreloadedCall]:
        """Execute every resolved sub-call for *path*, keyed by method name.

        Unresolved and failing sub-calls are logged and left out; they
        never fail the others. Returns an empty dict for reserved paths
        and paths with no matching pattern.
        """
        results: dict[str, PreloadedCall] = {}
        if not self.should_preload(path):
            return results

        plan = self.plan(path)
        if plan is None:
            logger.debug("Preload: no route for %r", path)
            return results

        lock = anyio.Lock()

        async def _run(call: PlannedCall) -> None:
            try:
                request, response = await self._preload(context, call.method, call.params)
            except Exception as exc:
                logger.info("Preload: failed method=%s error=%s", call.method, exc)
                return
            async with lock:
                results[call.method] = PreloadedCall(request=request, response=response)

        with anyio.move_on_after(self._config.timeout) as scope:
            async with anyio.create_task_group() as tg:
                for call in plan.calls:
                    if call.unresolved:
                        logger.info(
                            "Preload: skipping method=%s unsubstituted params=%s",
                            call.method,
                            dict(call.params or {}),
                        )
                        continue
                    tg.start_soon(_run, call)

        if scope.cancelled_caught:
            logger.info(
                "Preload: deadline of %.2fs exceeded for %r, %d of %d calls completed",
                self._config.timeout,
                path,
                len(results),
                len(plan.runnable),
            )
        return results
