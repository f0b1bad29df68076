"""Shared test fixtures for the invoicing simulator."""

import sys
from pathlib import Path

import httpx
import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.common.config import Config
from src.common.http_client import HTTPClient
from src.product_instance.models import ProductFlavor, ProductInstance

CATALOG_URL = "https://api.example.test/v2/products/instances"

_ENV_VARS = ("CATALOG_URL", "REQUEST_TIMEOUT", "PRELOAD_LOGOS", "USER_AGENT")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of Config defaults."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config() -> Config:
    return Config(catalog_url=CATALOG_URL)


def make_raw_flavor(name: str, price: float, **overrides) -> dict:
    raw = {
        "name": name,
        "price": price,
        "mem": 1024,
        "memory": {"unit": "B", "value": 1073741824, "formatted": "1 GiB"},
        "cpus": 1,
        "gpus": 0,
        "available": True,
        "microservice": False,
        "machine_learning": False,
        "nice": 0,
    }
    raw.update(overrides)
    return raw


def make_raw_instance(instance_id: str, name: str, flavors: list[dict], **overrides) -> dict:
    raw = {
        "type": "docker",
        "version": "20190829",
        "variant": {
            "id": instance_id,
            "slug": name.lower(),
            "name": name,
            "deployType": name.lower(),
            "logo": f"https://assets.example.test/logos/{instance_id}.svg",
        },
        "description": f"{name} runtime",
        "enabled": True,
        "comingSoon": False,
        "maxInstances": 40,
        "tags": [],
        "flavors": flavors,
    }
    raw.update(overrides)
    return raw


@pytest.fixture
def raw_catalog() -> list[dict]:
    """Three instances as served by the catalog API."""
    return [
        make_raw_instance("node-id", "Node", [
            make_raw_flavor("S", 0.4),
            make_raw_flavor("XS", 0.2),
            make_raw_flavor("M", 0.8, mem=4096, memory={"formatted": "4 GiB"}, cpus=4),
        ]),
        make_raw_instance("docker-id", "Docker", [
            make_raw_flavor("nano", 0.1),
            make_raw_flavor("S", 0.4),
        ]),
        make_raw_instance("java-id", "Java", [
            make_raw_flavor("XL", 10, gpus=1, machine_learning=True),
        ], comingSoon=True),
    ]


def make_instance(instance_id: str, name: str, flavors: list[tuple[str, float]] = ()) -> ProductInstance:
    """Build a view-model instance with (name, price) flavors."""
    instance = ProductInstance(id=instance_id, name=name)
    object.__setattr__(instance, "flavors", tuple(
        ProductFlavor(instance=instance, name=fname, price=price)
        for fname, price in flavors
    ))
    return instance


def mock_http_client(config: Config, handler) -> HTTPClient:
    """HTTPClient whose requests are answered by ``handler``."""
    transport = httpx.MockTransport(handler)
    return HTTPClient(config, client=httpx.AsyncClient(transport=transport, follow_redirects=True))


@pytest.fixture
def raw_flavor_factory():
    return make_raw_flavor


@pytest.fixture
def raw_instance_factory():
    return make_raw_instance


@pytest.fixture
def instance_factory():
    return make_instance


@pytest.fixture
def http_client_factory(config):
    def _factory(handler) -> HTTPClient:
        return mock_http_client(config, handler)
    return _factory
