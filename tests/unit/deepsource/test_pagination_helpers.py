"""
Testes dos helpers de paginação.

Testa:
  - resposta paginada vazia
  - validação de cursor
  - textos de ajuda de paginação (simples e detalhado)
  - parse das respostas GraphQL em camelCase
"""

from projects.deepsource.schemas.pagination import PageInfo, PaginatedResponse
from projects.deepsource.utils.pagination.helpers import (
    create_empty_paginated_response,
    create_enhanced_pagination_help,
    create_pagination_help,
    is_valid_cursor,
    should_fetch_multiple_pages,
)


def test_empty_paginated_response():
    result = create_empty_paginated_response()

    assert result.items == []
    assert result.page_info.has_next_page is False
    assert result.page_info.has_previous_page is False
    assert result.total_count == 0


def test_is_valid_cursor():
    assert is_valid_cursor(None) is True
    assert is_valid_cursor("validCursor123") is True
    assert is_valid_cursor("") is False
    assert is_valid_cursor("   ") is False


def test_should_fetch_multiple_pages():
    assert should_fetch_multiple_pages(None) is False
    assert should_fetch_multiple_pages(0) is False
    assert should_fetch_multiple_pages(1) is False
    assert should_fetch_multiple_pages(2) is True


def test_pagination_help_uses_cursors():
    page_info = PageInfo(
        has_next_page=True,
        has_previous_page=True,
        start_cursor="start1",
        end_cursor="end1",
    )

    result = create_pagination_help(page_info)

    assert "end1" in result["forward_pagination"]
    assert "start1" in result["backward_pagination"]
    assert result["page_status"] == {"has_next_page": True, "has_previous_page": True}


def test_pagination_help_without_cursors_uses_placeholder():
    result = create_pagination_help(PageInfo())

    assert "cursor_value" in result["forward_pagination"]
    assert "cursor_value" in result["backward_pagination"]


def test_enhanced_help_with_next_page_only():
    page_info = PageInfo(has_next_page=True, end_cursor="end1")

    result = create_enhanced_pagination_help(page_info, 10)

    assert result["current_page"] == {
        "size": 10,
        "has_next_page": True,
        "has_previous_page": False,
    }
    assert result["next_page"]["example"] == '{"first": 10, "after": "end1"}'
    assert result["previous_page"] is None
    assert set(result["pagination_types"]) == {"forward", "backward", "legacy"}


def test_enhanced_help_with_previous_page():
    page_info = PageInfo(has_previous_page=True, start_cursor="start1")

    result = create_enhanced_pagination_help(page_info, 3)

    assert result["next_page"] is None
    assert result["previous_page"]["example"] == '{"last": 10, "before": "start1"}'


def test_response_parses_graphql_shape():
    response = PaginatedResponse.model_validate({
        "items": [{"id": "run-1"}],
        "pageInfo": {
            "hasNextPage": True,
            "hasPreviousPage": False,
            "startCursor": "s1",
            "endCursor": "e1",
        },
        "totalCount": 12,
    })

    assert response.page_info.has_next_page is True
    assert response.page_info.end_cursor == "e1"
    assert response.total_count == 12
    assert response.to_graphql()["pageInfo"]["startCursor"] == "s1"
