"""Tests for wayfinder.preload.spec — declarations and manifest loading."""

import json
from pathlib import Path

import pytest

from wayfinder.errors import ConfigurationError
from wayfinder.preload.spec import RouteSpec, RpcSpec, load_route_specs, parse_route_specs

MANIFEST = {
    "routes": [
        {"pattern": "/", "rpcs": [{"method": "GetItems"}]},
        {
            "pattern": "/users/:id",
            "rpcs": [
                {"method": "GetUser", "params": {"userId": ":id"}},
                {"method": "GetUserPosts"},
            ],
        },
        {"pattern": "/about"},
    ]
}


class TestParseRouteSpecs:
    def test_object_form(self) -> None:
        specs = parse_route_specs(MANIFEST)
        assert [s.pattern for s in specs] == ["/", "/users/:id", "/about"]
        assert specs[1].rpcs[0] == RpcSpec("GetUser", {"userId": ":id"})
        assert specs[1].rpcs[1].params is None
        assert specs[2].rpcs == ()

    def test_list_form(self) -> None:
        specs = parse_route_specs(MANIFEST["routes"])
        assert len(specs) == 3

    def test_order_preserved(self) -> None:
        specs = parse_route_specs([{"pattern": "/b"}, {"pattern": "/a"}])
        assert [s.pattern for s in specs] == ["/b", "/a"]

    @pytest.mark.parametrize(
        ("data", "message"),
        [
            ({}, "'routes' key"),
            ("nope", "must be a list"),
            ([1], r"routes\[0\]: expected an object"),
            ([{"pattern": "users"}], "'pattern' must be"),
            ([{"pattern": "/", "rpcs": {}}], "'rpcs' must be a list"),
            ([{"pattern": "/", "rpcs": [{}]}], r"routes\[0\]\.rpcs\[0\]: 'method'"),
            ([{"pattern": "/", "rpcs": [{"method": "M", "params": {"a": 1}}]}], "'params'"),
        ],
    )
    def test_malformed(self, data: object, message: str) -> None:
        with pytest.raises(ConfigurationError, match=message):
            parse_route_specs(data)


class TestRpcSpec:
    def test_params_read_only(self) -> None:
        declared = {"id": ":id"}
        rpc = RpcSpec("GetUser", declared)
        declared["id"] = "changed"
        assert rpc.params == {"id": ":id"}
        with pytest.raises(TypeError):
            rpc.params["id"] = "x"  # type: ignore[index]

    def test_route_spec_defaults(self) -> None:
        assert RouteSpec("/").rpcs == ()


class TestLoadRouteSpecs:
    def test_load(self, tmp_path: Path) -> None:
        path = tmp_path / "preload.json"
        path.write_text(json.dumps(MANIFEST), encoding="utf-8")
        specs = load_route_specs(path)
        assert specs == parse_route_specs(MANIFEST)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_route_specs(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_route_specs(path)
