# cctvlog/core/exceptions.py
from fastapi import status


class CCTVLogError(Exception):
    """Erro de domínio; o handler em main.py converte em {"detail": ...}."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class StorageError(CCTVLogError):
    # banco inacessível ou escrita rejeitada
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class ValidationError(CCTVLogError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class NotFoundError(CCTVLogError):
    status_code = status.HTTP_404_NOT_FOUND
