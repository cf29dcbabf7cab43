"""Schemas de paginação Relay das respostas GraphQL do DeepSource."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from projects.deepsource.schemas.base import CamelCaseModel

T = TypeVar("T")


class PageInfo(CamelCaseModel):
    """Informações de navegação entre páginas (Relay ``pageInfo``)."""

    has_next_page: bool = False
    has_previous_page: bool = False
    start_cursor: Optional[str] = None
    end_cursor: Optional[str] = None


class PaginatedResponse(CamelCaseModel, Generic[T]):
    """Página de resultados."""

    items: list[T] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo)
    # Total informado pela API, não necessariamente len(items)
    total_count: int = 0


class PaginationMetadata(BaseModel):
    """Metadados de paginação amigáveis para respostas de tools."""

    has_more_pages: bool
    page_size: int
    next_cursor: Optional[str] = None
    previous_cursor: Optional[str] = None
    total_count: Optional[int] = None
    pages_fetched: Optional[int] = None
    limit_reached: Optional[bool] = None


class PaginatedResponseWithMetadata(PaginatedResponse[T], Generic[T]):
    """Página de resultados acompanhada de ``PaginationMetadata``."""

    pagination: PaginationMetadata


class MultiPageResult(CamelCaseModel, Generic[T]):
    """Resultado agregado de uma busca em múltiplas páginas."""

    items: list[T] = Field(default_factory=list)
    pages_fetched: int = 0
    has_more: bool = False
    last_cursor: Optional[str] = None
    total_count: Optional[int] = None
