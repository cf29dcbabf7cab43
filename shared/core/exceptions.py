"""
Exceções customizadas da integração DeepSource.
"""

from typing import Any, Optional


class DeepSourceServiceException(Exception):
    """Exceção base para erros da integração DeepSource."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(DeepSourceServiceException, ValueError):
    """Erro de validação de dados."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Erro de validação em '{field}': {message}",
            details={"field": field}
        )
