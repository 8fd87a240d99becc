from pydantic import Field
from typing import Dict, List
from src.models import CustomModel
from src.constants.languages import Language


class DictionaryItemCreate(CustomModel):
    """A translation waiting to be inserted"""
    vocabulary_id: int
    language: Language
    translation: str = Field(..., min_length=1)


class DictionaryItemResponse(CustomModel):
    """A stored dictionary row"""
    id: int
    vocabulary_id: int
    language: Language
    translation: str


class NestedDictionaryItem(CustomModel):
    """A vocabulary entry with every translation it has"""
    vocabulary_id: int
    target: str = Field(..., description="Bản dịch khớp với từ khóa tìm kiếm")
    target_language: Language = Field(..., description="Ngôn ngữ của bản dịch khớp")
    translations: Dict[Language, str] = Field(..., description="Bản dịch theo từng ngôn ngữ")


class TranslationSearchResponse(CustomModel):
    """Response schema for translation search"""
    total_pages: int = Field(..., description="Tổng số trang")
    page: int = Field(..., description="Trang hiện tại")
    page_size: int = Field(..., description="Số kết quả mỗi trang")
    results: List[NestedDictionaryItem] = Field(..., description="Danh sách kết quả tìm kiếm")


class LanguageResponse(CustomModel):
    """Response schema for a catalog language"""
    code: Language
    source_url: str
