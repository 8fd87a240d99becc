from fastapi import status
from src.exceptions import AppException

class DictionaryException(AppException):
    """Base exception for dictionary module errors"""
    def __init__(self, detail: str = "Lỗi khi xử lý từ điển", status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        super().__init__(status_code=status_code, detail=detail)

class SourceUnavailableException(DictionaryException):
    """Exception for network failures while downloading a text map"""
    def __init__(self, detail: str = "Không thể tải dữ liệu từ điển từ nguồn"):
        super().__init__(detail=detail, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

class SourceDecodeException(DictionaryException):
    """Exception for malformed text map documents"""
    def __init__(self, detail: str = "Dữ liệu từ điển từ nguồn không hợp lệ"):
        super().__init__(detail=detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

class DictionaryStoreException(DictionaryException):
    """Exception for database errors; the detail stays generic"""
    def __init__(self, detail: str = "Lỗi hệ thống nội bộ"):
        super().__init__(detail=detail, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

class UnsupportedLanguageException(DictionaryException):
    """Exception for language codes outside the catalog"""
    def __init__(self, detail: str = "Ngôn ngữ không được hỗ trợ"):
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)

class SourceRejectedException(DictionaryException):
    """Exception for 4xx answers from the source; retrying will not help"""
    def __init__(self, detail: str = "Nguồn dữ liệu từ chối yêu cầu"):
        super().__init__(detail=detail, status_code=status.HTTP_502_BAD_GATEWAY)
