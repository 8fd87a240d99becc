from fastapi import HTTPException

class AppException(HTTPException):
    """Base exception for application errors"""
    pass
