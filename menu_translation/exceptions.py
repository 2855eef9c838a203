from fastapi import HTTPException


class AppException(HTTPException):
    """Base exception for application errors"""
    pass


class StorageError(Exception):
    """Raised by repositories and cache backends when the persistent store fails.

    Never reaches the HTTP layer: callers log it and degrade to an empty
    result or a cache miss.
    """
