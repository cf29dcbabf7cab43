"""
Helpers de paginação Relay para as tools do DeepSource.

Converte parâmetros de paginação vindos das tools (tipos soltos, campos
conflitantes) na forma canônica aceita pela API GraphQL e monta os textos de
ajuda de paginação anexados às respostas.
"""

import math
from dataclasses import asdict
from typing import Any, Mapping, Optional, Union

from shared.domain.value_objects.pagination import PaginationParams
from shared.infrastructure.logging import get_logger
from projects.deepsource.config import pagination_settings
from projects.deepsource.schemas.pagination import PageInfo, PaginatedResponse

logger = get_logger(__name__)

RawPaginationParams = Union[Mapping[str, Any], PaginationParams, None]


def _as_dict(params: RawPaginationParams) -> dict[str, Any]:
    """Copia os parâmetros ignorando valores ``None``."""
    if params is None:
        return {}
    if isinstance(params, PaginationParams):
        params = asdict(params)
    return {k: v for k, v in params.items() if v is not None}


def _coerce_int(field: str, value: Any, minimum: int) -> int:
    """max(minimum, floor(value)); valores inválidos caem no mínimo."""
    # int não passa por float: inteiros enormes estourariam a conversão
    if isinstance(value, int):
        return max(minimum, int(value))

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        number = None

    if number is None or not math.isfinite(number):
        logger.warning(
            "Valor de paginação inválido",
            field=field,
            value=repr(value),
            fallback=minimum,
        )
        return minimum

    return max(minimum, math.floor(number))


def _coerce_cursor(value: Any) -> str:
    """Converte o cursor para string no formato JSON (``true``/``false``)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


def handle_page_size_alias(params: RawPaginationParams) -> dict[str, Any]:
    """Use ``page_size`` as ``first`` when ``first`` was not given."""
    raw = _as_dict(params)
    page_size = raw.pop("page_size", None)
    if page_size is not None and "first" not in raw:
        raw["first"] = page_size
    return raw


def normalize_pagination_params(params: RawPaginationParams) -> PaginationParams:
    """
    Normaliza parâmetros de paginação para a forma canônica Relay.

    Regras, na ordem:
      1. ``page_size`` vira ``first`` (se ``first`` não veio); ``max_pages`` é descartado
      2. ``offset`` → max(0, floor); ``first``/``last`` → max(1, floor)
      3. ``after``/``before`` → string
      4. ``before`` preenchido: paginação para trás, ``last = last ?? first ?? padrão``,
         remove ``first`` e ``after``
      5. senão ``after`` preenchido: paginação para frente, ``first = first ?? padrão``,
         remove ``last`` e ``before``
      6. senão: sem cursor, ``offset``/``first``/``last`` seguem como vieram

    Nunca lança erro por entrada conflitante: a precedência acima resolve.

    Args:
        params: Mapeamento cru (ex.: argumentos de tool) ou ``PaginationParams``

    Returns:
        ``PaginationParams`` canônico
    """
    raw = handle_page_size_alias(params)
    values: dict[str, Any] = {}

    if "offset" in raw:
        values["offset"] = _coerce_int("offset", raw["offset"], 0)
    if "first" in raw:
        values["first"] = _coerce_int("first", raw["first"], 1)
    if "last" in raw:
        values["last"] = _coerce_int("last", raw["last"], 1)
    if "after" in raw:
        values["after"] = _coerce_cursor(raw["after"])
    if "before" in raw:
        values["before"] = _coerce_cursor(raw["before"])

    default_size = pagination_settings.deepsource_default_page_size

    if values.get("before"):
        values["last"] = values.get("last") or values.get("first") or default_size
        values.pop("first", None)
        values.pop("after", None)
    elif values.get("after"):
        values.setdefault("first", default_size)
        values.pop("last", None)
        values.pop("before", None)
    else:
        # Cursor vazio equivale a ausente
        values.pop("after", None)
        values.pop("before", None)
        if "last" in values:
            dropped_first = values.pop("first", None)
            logger.warning(
                "Paginação não padrão: last sem cursor before",
                last=values["last"],
                dropped_first=dropped_first,
            )

    return PaginationParams(**values)


def process_pagination_params(
    params: RawPaginationParams,
) -> tuple[PaginationParams, Optional[int]]:
    """
    Resolve o alias ``page_size``, normaliza e separa ``max_pages``.

    Returns:
        Tupla (parâmetros canônicos, max_pages ou None)
    """
    raw = _as_dict(params)
    max_pages = raw.pop("max_pages", None)
    if max_pages is not None:
        max_pages = _coerce_int("max_pages", max_pages, 0)

    return normalize_pagination_params(raw), max_pages


def should_fetch_multiple_pages(max_pages: Optional[int]) -> bool:
    return max_pages is not None and max_pages > 1


def create_empty_paginated_response() -> PaginatedResponse:
    """Resposta paginada vazia com estrutura consistente."""
    return PaginatedResponse(
        items=[],
        page_info=PageInfo(has_next_page=False, has_previous_page=False),
        total_count=0,
    )


def is_valid_cursor(cursor: Optional[str]) -> bool:
    """Cursor ausente é válido (início da lista); string vazia ou só espaços não."""
    if cursor is None:
        return True
    return isinstance(cursor, str) and bool(cursor.strip())


def create_pagination_help(page_info: PageInfo) -> dict[str, Any]:
    """Ajuda resumida de paginação para respostas de tools."""
    return {
        "description": "This API uses Relay-style cursor-based pagination",
        "forward_pagination": (
            f"To get the next page, use 'first: 10, after: "
            f"\"{page_info.end_cursor or 'cursor_value'}\"'"
        ),
        "backward_pagination": (
            f"To get the previous page, use 'last: 10, before: "
            f"\"{page_info.start_cursor or 'cursor_value'}\"'"
        ),
        "page_status": {
            "has_next_page": page_info.has_next_page,
            "has_previous_page": page_info.has_previous_page,
        },
    }


def create_enhanced_pagination_help(
    page_info: PageInfo, item_count: int
) -> dict[str, Any]:
    """Ajuda detalhada de paginação, com exemplos para a próxima página e a anterior."""
    next_page = None
    if page_info.has_next_page:
        next_page = {
            "example": f'{{"first": 10, "after": "{page_info.end_cursor}"}}',
            "description": "Use these parameters to fetch the next page of results",
        }

    previous_page = None
    if page_info.has_previous_page:
        previous_page = {
            "example": f'{{"last": 10, "before": "{page_info.start_cursor}"}}',
            "description": "Use these parameters to fetch the previous page of results",
        }

    return {
        "description": (
            "This API uses Relay-style cursor-based pagination "
            "for efficient data retrieval"
        ),
        "current_page": {
            "size": item_count,
            "has_next_page": page_info.has_next_page,
            "has_previous_page": page_info.has_previous_page,
        },
        "next_page": next_page,
        "previous_page": previous_page,
        "pagination_types": {
            "forward": 'For forward pagination, use "first" with optional "after" cursor',
            "backward": 'For backward pagination, use "last" with optional "before" cursor',
            "legacy": (
                "Legacy offset-based pagination is also supported "
                'via the "offset" parameter'
            ),
        },
    }
