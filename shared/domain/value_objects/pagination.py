"""Pagination value objects."""
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional

from shared.core.exceptions import ValidationException


class PageDirection(str, Enum):
    """Direção de paginação de uma requisição canônica."""
    FORWARD = "forward"
    BACKWARD = "backward"
    OFFSET = "offset"


@dataclass(frozen=True)
class PaginationParams:
    """Requisição de paginação Relay na forma canônica.

    Campos de avanço (``first``/``after``) e de retrocesso
    (``last``/``before``) nunca coexistem.
    """
    offset: Optional[int] = None
    first: Optional[int] = None
    last: Optional[int] = None
    after: Optional[str] = None
    before: Optional[str] = None

    def __post_init__(self):
        forward = self.first is not None or self.after is not None
        backward = self.last is not None or self.before is not None
        if forward and backward:
            raise ValidationException(
                "pagination",
                "first/after não podem ser combinados com last/before",
            )

    @property
    def direction(self) -> PageDirection:
        """Direção implícita nos campos presentes.

        ``last`` sem cursor também conta como retrocesso; ``first`` sozinho
        segue como ``OFFSET``, já que pode acompanhar ``offset``.
        """
        if self.before or self.last is not None:
            return PageDirection.BACKWARD
        if self.after:
            return PageDirection.FORWARD
        return PageDirection.OFFSET

    def to_variables(self) -> dict[str, Any]:
        """Variáveis GraphQL apenas com os campos definidos."""
        return {k: v for k, v in asdict(self).items() if v is not None}
