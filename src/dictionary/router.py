import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from src.config import settings
from src.constants.languages import LanguageCatalog
from src.dictionary.dependencies import get_dictionary_service, get_language_catalog
from src.dictionary.exceptions import DictionaryException
from src.dictionary.schemas import LanguageResponse, TranslationSearchResponse
from src.dictionary.service import DictionaryService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Dictionary"])


@router.get("/translations/{query}", response_model=TranslationSearchResponse)
async def search_translations(
    query: str = Path(..., description="Từ khóa tìm kiếm"),
    page: Optional[int] = Query(None, ge=1, description="Trang (mặc định 1)"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Số kết quả mỗi trang"),
    service: DictionaryService = Depends(get_dictionary_service),
):
    """
    Tìm kiếm bản dịch theo chuỗi con trong mọi ngôn ngữ

    - **query**: Từ khóa tìm kiếm (phân biệt chữ hoa/thường theo cấu hình)
    - **page**: Trang, bắt đầu từ 1
    - **page_size**: Số kết quả mỗi trang
    """
    logger.info(f"Searching '{query}' (page={page}, page_size={page_size})")
    try:
        return await service.search_translations(query, page, page_size)
    except DictionaryException as e:
        raise e
    except Exception as e:
        logger.exception(f"Search for '{query}' failed: {e}")
        raise HTTPException(
            status_code=500,
            detail="Lỗi hệ thống nội bộ"
        )


@router.get("/languages", response_model=List[LanguageResponse])
async def get_languages(catalog: LanguageCatalog = Depends(get_language_catalog)):
    """
    Lấy danh sách ngôn ngữ được hỗ trợ theo thứ tự hiển thị
    """
    return [
        LanguageResponse(code=language, source_url=catalog.source_url(language))
        for language in catalog
    ]
