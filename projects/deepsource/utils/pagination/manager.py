"""
Orquestração de paginação em múltiplas páginas.

A busca é estritamente sequencial: o cursor da página N+1 só é conhecido
depois que a página N retorna. Erros do fetcher não são tratados aqui; são
logados e propagados sem alteração, descartando o progresso parcial.
"""

import inspect
from dataclasses import dataclass, field, replace
from typing import (
    Any,
    AsyncGenerator,
    Awaitable,
    Callable,
    Iterable,
    Mapping,
    Optional,
    Union,
)

from shared.domain.value_objects.pagination import PaginationParams
from shared.infrastructure.logging import get_logger
from projects.deepsource.config import pagination_settings
from projects.deepsource.schemas.pagination import (
    MultiPageResult,
    PageInfo,
    PaginatedResponse,
    PaginatedResponseWithMetadata,
    PaginationMetadata,
)
from projects.deepsource.utils.pagination.helpers import (
    RawPaginationParams,
    create_empty_paginated_response,
    process_pagination_params,
    should_fetch_multiple_pages,
)

logger = get_logger(__name__)

PageResult = Union[PaginatedResponse, Mapping[str, Any]]
# Busca uma página a partir de (cursor, tamanho da página)
PageFetcher = Callable[
    [Optional[str], int], Union[PageResult, Awaitable[PageResult]]
]
# Busca uma página a partir dos parâmetros canônicos
SinglePageFetcher = Callable[
    [PaginationParams], Union[PageResult, Awaitable[PageResult]]
]


@dataclass
class MultiPageOptions:
    """Opções de busca em múltiplas páginas."""
    max_pages: int = field(
        default_factory=lambda: pagination_settings.deepsource_default_max_pages
    )
    page_size: int = field(
        default_factory=lambda: pagination_settings.deepsource_multi_page_size
    )
    fetch_all: bool = False
    on_progress: Optional[Callable[[int, int], None]] = None


def _as_response(page: PageResult) -> PaginatedResponse:
    """Aceita tanto o schema quanto o dict no formato GraphQL."""
    if isinstance(page, PaginatedResponse):
        return page
    return PaginatedResponse.model_validate(page)


async def _fetch_page(
    page_fetcher: PageFetcher,
    cursor: Optional[str],
    page_size: int,
    page_number: int,
) -> PaginatedResponse:
    try:
        result = page_fetcher(cursor, page_size)
        if inspect.isawaitable(result):
            result = await result
    except Exception as e:
        logger.error(
            "Erro ao buscar página",
            page_number=page_number,
            cursor=cursor,
            error=str(e),
            error_type=type(e).__name__,
        )
        raise
    return _as_response(result)


async def fetch_multiple_pages(
    page_fetcher: PageFetcher,
    options: Optional[MultiPageOptions] = None,
) -> MultiPageResult:
    """
    Busca várias páginas em sequência até acabar os dados ou o limite.

    Args:
        page_fetcher: Função que recebe (cursor, page_size) e retorna uma página
        options: Limite de páginas, tamanho da página, fetch_all e callback de progresso

    Returns:
        Itens agregados na ordem de busca e estado da paginação
    """
    options = options or MultiPageOptions()

    all_items: list = []
    pages_fetched = 0
    cursor: Optional[str] = None
    has_more = True
    total_count: Optional[int] = None

    logger.debug(
        "Iniciando busca de múltiplas páginas",
        max_pages=options.max_pages,
        page_size=options.page_size,
        fetch_all=options.fetch_all,
    )

    while has_more and (options.fetch_all or pages_fetched < options.max_pages):
        page = await _fetch_page(
            page_fetcher, cursor, options.page_size, pages_fetched + 1
        )

        all_items.extend(page.items)
        pages_fetched += 1

        cursor = page.page_info.end_cursor
        # Sem endCursor não há como avançar
        has_more = page.page_info.has_next_page and bool(cursor)
        total_count = page.total_count or None

        if options.on_progress:
            options.on_progress(pages_fetched, len(all_items))

        logger.debug(
            "Página obtida",
            page_number=pages_fetched,
            items_in_page=len(page.items),
            total_items_so_far=len(all_items),
            has_more=has_more,
        )

    if has_more:
        logger.info(
            "Limite de páginas atingido",
            max_pages=options.max_pages,
            pages_fetched=pages_fetched,
            total_items_fetched=len(all_items),
        )

    logger.info(
        "Busca de múltiplas páginas concluída",
        pages_fetched=pages_fetched,
        total_items=len(all_items),
        has_more=has_more,
    )

    return MultiPageResult(
        items=all_items,
        pages_fetched=pages_fetched,
        has_more=has_more,
        last_cursor=cursor or None,
        total_count=total_count,
    )


async def fetch_with_pagination(
    fetcher: SinglePageFetcher,
    params: RawPaginationParams,
) -> PaginatedResponse:
    """
    Fetch one page, or several pages when ``max_pages > 1``.

    Without ``max_pages`` (or with ``max_pages <= 1``) the fetcher is called
    once with the normalized params and its result is returned as is.
    Otherwise pages are fetched forward, following each page's ``endCursor``,
    and merged into a single response.
    """
    normalized, max_pages = process_pagination_params(params)

    if not should_fetch_multiple_pages(max_pages):
        result = fetcher(normalized)
        if inspect.isawaitable(result):
            result = await result
        return result

    if normalized.last is not None or normalized.before is not None:
        logger.warning(
            "Busca de múltiplas páginas só avança: last/before descartados",
            last=normalized.last,
            before=normalized.before,
        )

    page_size = normalized.first or pagination_settings.deepsource_multi_page_size
    start = replace(normalized, first=page_size, last=None, before=None)

    def page_fetcher(cursor: Optional[str], size: int):
        return fetcher(replace(start, first=size, after=cursor or start.after))

    result = await fetch_multiple_pages(
        page_fetcher,
        MultiPageOptions(
            max_pages=max_pages,
            page_size=page_size,
            on_progress=lambda pages, items: logger.debug(
                "Progresso da paginação",
                pages_fetched=pages,
                items_fetched=items,
            ),
        ),
    )

    page_info = PageInfo(
        has_next_page=result.has_more,
        has_previous_page=False,
        end_cursor=result.last_cursor if result.has_more else None,
    )

    # TODO: totalCount da última página pode ser menor que len(items) se as
    # páginas anteriores trouxeram mais itens; confirmar com a API antes de trocar
    return PaginatedResponse(
        items=result.items,
        page_info=page_info,
        total_count=result.total_count or len(result.items),
    )


async def iter_pages(
    page_fetcher: PageFetcher,
    page_size: Optional[int] = None,
) -> AsyncGenerator[list, None]:
    """Itera sobre as páginas, entregando os itens de cada uma."""
    page_size = page_size or pagination_settings.deepsource_multi_page_size
    cursor: Optional[str] = None
    page_number = 0

    while True:
        page_number += 1
        page = await _fetch_page(page_fetcher, cursor, page_size, page_number)

        yield page.items

        cursor = page.page_info.end_cursor
        if not page.page_info.has_next_page or not cursor:
            break


def merge_responses(responses: Iterable[Optional[PageResult]]) -> PaginatedResponse:
    """
    Junta várias respostas paginadas em uma só.

    ``hasNextPage``/``endCursor`` vêm da última resposta e
    ``hasPreviousPage``/``startCursor`` da primeira.
    """
    pages = [_as_response(r) for r in responses if r is not None]
    if not pages:
        return create_empty_paginated_response()

    first_page, last_page = pages[0], pages[-1]
    items = [item for page in pages for item in page.items]

    return PaginatedResponse(
        items=items,
        page_info=PageInfo(
            has_next_page=last_page.page_info.has_next_page,
            has_previous_page=first_page.page_info.has_previous_page,
            start_cursor=first_page.page_info.start_cursor or None,
            end_cursor=last_page.page_info.end_cursor or None,
        ),
        total_count=last_page.total_count or len(items),
    )


def add_pagination_metadata(
    response: PageResult,
    pages_fetched: int = 1,
    limit_reached: bool = False,
) -> PaginatedResponseWithMetadata:
    """Adiciona metadados de paginação amigáveis à resposta."""
    response = _as_response(response)
    page_info = response.page_info

    metadata = PaginationMetadata(
        has_more_pages=page_info.has_next_page,
        page_size=len(response.items),
        next_cursor=page_info.end_cursor or None,
        previous_cursor=page_info.start_cursor or None,
        total_count=response.total_count if response.total_count > 0 else None,
        pages_fetched=pages_fetched if pages_fetched > 1 else None,
        limit_reached=True if limit_reached else None,
    )

    return PaginatedResponseWithMetadata(
        items=response.items,
        page_info=page_info,
        total_count=response.total_count,
        pagination=metadata,
    )
