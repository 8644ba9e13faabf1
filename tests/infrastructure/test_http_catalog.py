"""Tests for the HTTP catalog source, with a stand-in requests session."""

import pytest
import requests

from storefront.domain.exceptions import CatalogUnavailableError, StorageError
from storefront.infrastructure.http.api_product_repository import HttpProductRepository


class _Response:

    def __init__(self, payload=None, status=200) -> None:
        self._payload = payload
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _Session:

    def __init__(self, response=None, error=None) -> None:
        self._response = response
        self._error = error
        self.urls: list[str] = []

    def get(self, url, **kwargs):
        self.urls.append(url)
        if self._error is not None:
            raise self._error
        return self._response


class TestHttpProductRepository:

    def test_lists_products(self):
        session = _Session(_Response([{"id": "rope", "name": "Rope", "price": 9.99}]))
        repo = HttpProductRepository("http://shop.local/", session=session)
        (product,) = repo.list_all()
        assert product.id == "rope"
        assert session.urls == ["http://shop.local/api/products"]

    def test_get_by_id(self):
        session = _Session(_Response([{"id": "a", "price": 1}, {"id": "b", "price": 2}]))
        repo = HttpProductRepository("http://shop.local", session=session)
        assert repo.get_by_id("b").id == "b"
        assert repo.get_by_id("c") is None

    def test_connection_error(self):
        session = _Session(error=requests.ConnectionError("refused"))
        with pytest.raises(CatalogUnavailableError):
            HttpProductRepository("http://shop.local", session=session).list_all()

    def test_http_error(self):
        session = _Session(_Response(status=503))
        with pytest.raises(CatalogUnavailableError):
            HttpProductRepository("http://shop.local", session=session).list_all()

    def test_bad_json(self):
        session = _Session(_Response(ValueError("not json")))
        with pytest.raises(CatalogUnavailableError):
            HttpProductRepository("http://shop.local", session=session).list_all()

    def test_not_a_list(self):
        session = _Session(_Response({"products": []}))
        with pytest.raises(CatalogUnavailableError, match="did not return a list"):
            HttpProductRepository("http://shop.local", session=session).list_all()

    def test_read_only(self):
        repo = HttpProductRepository("http://shop.local", session=_Session())
        with pytest.raises(StorageError):
            repo.replace_all([])
