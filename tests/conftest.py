"""Pytest configuration and fixtures."""

import json
from collections.abc import Callable
from pathlib import Path

import httpx
import pytest

from category_api.core.config import Settings
from category_api.schemas.category import FilterPolicy, Identity, Site
from category_api.schemas.site_config import SiteConfigFile
from category_api.services.category_fetcher import CategoryFetcher
from category_api.services.category_service import CategoryResolutionService
from category_api.services.site_registry import ConfigSiteRegistry

SAMPLE_CONFIG = {
    "SiteConfig": {"DisableYellowFilter": False, "BannedTerms": ["成人", "伦理"]},
    "SourceConfig": [
        {"key": "siteA", "name": "Site A", "api": "http://x/api"},
        {"key": "siteB", "name": "Site B", "api": "http://y/api.php/provide/vod",
         "headers": {"Referer": "http://y/"}},
        {"key": "siteOff", "name": "Disabled", "api": "http://z/api", "disabled": True},
    ],
    "UserConfig": {
        "Users": [
            {"username": "u1", "enabledApis": ["siteA"]},
            {"username": "admin", "role": "owner"},
            {"username": "spammer", "banned": True},
        ]
    },
}


class StaticPolicyProvider:
    """Filter policy provider returning a fixed policy."""

    def __init__(self, policy: FilterPolicy) -> None:
        self.policy = policy

    def current(self) -> FilterPolicy:
        return self.policy


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, respond: Callable[[httpx.Request], httpx.Response]) -> None:
        self.respond = respond
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)


def json_handler(payload, status_code: int = 200) -> RecordingHandler:
    return RecordingHandler(lambda request: httpx.Response(status_code, json=payload))


def make_fetcher(handler, timeout: float = 10.0) -> CategoryFetcher:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CategoryFetcher(timeout=timeout, client=client)


@pytest.fixture
def site_config() -> SiteConfigFile:
    return SiteConfigFile.model_validate(SAMPLE_CONFIG)


@pytest.fixture
def site_config_path(tmp_path: Path) -> Path:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(SAMPLE_CONFIG, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def registry(site_config: SiteConfigFile) -> ConfigSiteRegistry:
    return ConfigSiteRegistry(site_config, default_headers={"Accept": "application/json"})


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def u1() -> Identity:
    return Identity(username="u1")


@pytest.fixture
def admin() -> Identity:
    return Identity(username="admin", role="owner")


@pytest.fixture
def site_a() -> Site:
    return Site(key="siteA", name="Site A", api="http://x/api", headers={"Accept": "application/json"})


@pytest.fixture
def filter_disabled() -> StaticPolicyProvider:
    return StaticPolicyProvider(FilterPolicy(enabled=False, banned_terms=["成人"]))


@pytest.fixture
def filter_enabled() -> StaticPolicyProvider:
    return StaticPolicyProvider(FilterPolicy(enabled=True, banned_terms=["成人"]))


@pytest.fixture
def build_service(registry: ConfigSiteRegistry):
    """Factory for a resolution service over the sample registry and a mocked provider."""

    def _build(handler, policy_provider, timeout: float = 10.0) -> CategoryResolutionService:
        return CategoryResolutionService(
            registry=registry,
            policy_provider=policy_provider,
            fetcher=make_fetcher(handler, timeout=timeout),
        )

    return _build
