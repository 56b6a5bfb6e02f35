import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import httpx

from product_recommender.catalog.config import CatalogConfig
from product_recommender.catalog.provider import (
    HttpCatalogProvider,
    JsonFileCatalogProvider,
    StaticCatalogProvider,
    get_default_provider,
)
from product_recommender.recommendations.models import Product

RAW_PRODUCTS = [
    {
        "id": 1,
        "name": "Marketing Digital Básico",
        "category": "marketing",
        "price": 99.0,
        "tags": ["iniciante", "marketing", "digital"],
        "description": "Curso introdutório de marketing digital",
    },
    {
        "id": 2,
        "name": "Automação de Vendas",
        "category": "vendas",
        "price": 199.0,
        "tags": ["vendas", "automação", "intermediário"],
        "description": "Sistema completo de automação de vendas",
    },
]

TEST_CONFIG = CatalogConfig(url="http://catalog.test/products", timeout=1.0)


def _mock_response(payload) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


@patch("product_recommender.catalog.provider.httpx.get")
def test_http_provider_loads_products(mock_get):
    mock_get.return_value = _mock_response(RAW_PRODUCTS)

    catalog = HttpCatalogProvider(TEST_CONFIG).get_catalog()

    assert [p.id for p in catalog] == [1, 2]
    assert all(isinstance(p, Product) for p in catalog)
    mock_get.assert_called_once_with("http://catalog.test/products", timeout=1.0)


@patch("product_recommender.catalog.provider.httpx.get")
def test_http_provider_accepts_wrapped_payload(mock_get):
    mock_get.return_value = _mock_response({"products": RAW_PRODUCTS})

    catalog = HttpCatalogProvider(TEST_CONFIG).get_catalog()

    assert [p.name for p in catalog] == ["Marketing Digital Básico", "Automação de Vendas"]


@patch("product_recommender.catalog.provider.httpx.get")
def test_http_provider_network_error_returns_empty(mock_get):
    mock_get.side_effect = httpx.ConnectError("connection refused")

    assert HttpCatalogProvider(TEST_CONFIG).get_catalog() == []


@patch("product_recommender.catalog.provider.httpx.get")
def test_http_provider_bad_status_returns_empty(mock_get):
    request = httpx.Request("GET", TEST_CONFIG.url)
    response = MagicMock()
    response.raise_for_status.side_effect = httpx.HTTPStatusError(
        "500", request=request, response=httpx.Response(500, request=request)
    )
    mock_get.return_value = response

    assert HttpCatalogProvider(TEST_CONFIG).get_catalog() == []


@patch("product_recommender.catalog.provider.httpx.get")
def test_http_provider_bad_json_returns_empty(mock_get):
    response = _mock_response(None)
    response.json.side_effect = json.JSONDecodeError("bad", "{{{", 0)
    mock_get.return_value = response

    assert HttpCatalogProvider(TEST_CONFIG).get_catalog() == []


@patch("product_recommender.catalog.provider.httpx.get")
def test_http_provider_invalid_records_return_empty(mock_get):
    mock_get.return_value = _mock_response([{"id": 1, "name": "No price"}])

    assert HttpCatalogProvider(TEST_CONFIG).get_catalog() == []


def test_file_provider_reads_json_server_db(tmp_path: Path):
    db = tmp_path / "db.json"
    db.write_text(json.dumps({"products": RAW_PRODUCTS}), encoding="utf-8")

    catalog = JsonFileCatalogProvider(db).get_catalog()

    assert [p.category for p in catalog] == ["marketing", "vendas"]


def test_file_provider_missing_file_returns_empty(tmp_path: Path):
    assert JsonFileCatalogProvider(tmp_path / "missing.json").get_catalog() == []


def test_static_provider_returns_snapshot_copy():
    products = [Product(**raw) for raw in RAW_PRODUCTS]
    provider = StaticCatalogProvider(products)

    first = provider.get_catalog()
    first.clear()

    assert len(provider.get_catalog()) == 2


def test_default_provider_follows_config(tmp_path: Path):
    assert isinstance(get_default_provider(CatalogConfig(source="http")), HttpCatalogProvider)

    provider = get_default_provider(CatalogConfig(source="file", path=tmp_path / "db.json"))
    assert isinstance(provider, JsonFileCatalogProvider)
    assert provider.path == tmp_path / "db.json"
