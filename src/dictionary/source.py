import logging
from typing import Dict, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from src.constants.languages import Language, LanguageCatalog
from src.dictionary.exceptions import (
    SourceDecodeException, SourceRejectedException, SourceUnavailableException
)

logger = logging.getLogger(__name__)

# {"1001": "Trailblazer", ...}; keys arrive as strings and are coerced to int
TEXT_MAP_ADAPTER = TypeAdapter(Dict[int, str])


class TextMapClient:
    """
    Downloads the per-language translation maps ("text maps").

    One request per language, no retries: a failed download is reported to
    the caller as a typed exception and the refresh decides what to do.
    """

    def __init__(
        self,
        catalog: LanguageCatalog,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.catalog = catalog
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def fetch_text_map(self, language: Language) -> Dict[int, str]:
        url = self.catalog.source_url(language)
        logger.info(f"Getting data for {language.value} from {url}")

        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(f"Text map for {language.value} returned {status_code}")
            if status_code >= 500:
                raise SourceUnavailableException(
                    f"Nguồn dữ liệu trả về lỗi {status_code} cho ngôn ngữ {language.value}"
                ) from e
            raise SourceRejectedException(
                f"Nguồn dữ liệu trả về lỗi {status_code} cho ngôn ngữ {language.value}"
            ) from e
        except httpx.TransportError as e:
            logger.error(f"Text map download for {language.value} failed: {e!r}")
            raise SourceUnavailableException(
                f"Không thể tải dữ liệu cho ngôn ngữ {language.value}"
            ) from e

        try:
            return TEXT_MAP_ADAPTER.validate_json(response.content)
        except ValidationError as e:
            logger.error(f"Text map for {language.value} is malformed: {e.error_count()} errors")
            raise SourceDecodeException(
                f"Dữ liệu của ngôn ngữ {language.value} không hợp lệ"
            ) from e

    async def aclose(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
