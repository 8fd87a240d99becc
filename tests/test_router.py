from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from src.constants.languages import Language
from src.dictionary.dependencies import get_dictionary_service
from src.dictionary.exceptions import DictionaryStoreException
from src.dictionary.router import router
from src.dictionary.schemas import NestedDictionaryItem, TranslationSearchResponse
from src.dictionary.service import DictionaryService


@pytest.fixture
def service():
    return MagicMock(spec=DictionaryService)


@pytest.fixture
def client(service):
    """TestClient for the dictionary router with the search service mocked out."""
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    app.dependency_overrides[get_dictionary_service] = lambda: service
    with TestClient(app) as c:
        yield c


class TestSearchEndpoint:

    def test_returns_nested_items(self, client, service):
        service.search_translations = AsyncMock(return_value=TranslationSearchResponse(
            total_pages=1,
            page=1,
            page_size=10,
            results=[NestedDictionaryItem(
                vocabulary_id=42,
                target="hello",
                target_language=Language.EN,
                translations={Language.EN: "hello", Language.FR: "bonjour"},
            )],
        ))

        response = client.get("/api/v1/translations/hello")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "total_pages": 1,
            "page": 1,
            "page_size": 10,
            "results": [{
                "vocabulary_id": 42,
                "target": "hello",
                "target_language": "en",
                "translations": {"en": "hello", "fr": "bonjour"},
            }],
        }
        service.search_translations.assert_awaited_once_with("hello", None, 10)

    def test_passes_page_and_page_size(self, client, service):
        service.search_translations = AsyncMock(return_value=TranslationSearchResponse(
            total_pages=0, page=2, page_size=5, results=[],
        ))

        response = client.get("/api/v1/translations/Kafka", params={"page": 2, "page_size": 5})

        assert response.status_code == status.HTTP_200_OK
        service.search_translations.assert_awaited_once_with("Kafka", 2, 5)

    @pytest.mark.parametrize("params", [{"page_size": 0}, {"page_size": 1000}, {"page": 0}, {"page": "abc"}])
    def test_rejects_invalid_paging(self, client, service, params):
        response = client.get("/api/v1/translations/hello", params=params)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        service.search_translations.assert_not_called()

    def test_store_error_maps_to_internal_error(self, client, service):
        service.search_translations = AsyncMock(side_effect=DictionaryStoreException())

        response = client.get("/api/v1/translations/hello")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"detail": "Lỗi hệ thống nội bộ"}

    def test_unexpected_error_does_not_leak_details(self, client, service):
        service.search_translations = AsyncMock(side_effect=RuntimeError("password=hunter2"))

        response = client.get("/api/v1/translations/hello")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "hunter2" not in response.text


class TestLanguagesEndpoint:

    def test_lists_catalog_in_order(self, client):
        response = client.get("/api/v1/languages")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert len(body) == 13
        assert [entry["code"] for entry in body[:2]] == ["cht", "chs"]
        assert body[3]["code"] == "en"
        assert body[3]["source_url"].endswith("TextMapEN.json")


def test_health_check():
    from src.main import app

    response = TestClient(app).get("/health")

    assert response.status_code == status.HTTP_200_OK
