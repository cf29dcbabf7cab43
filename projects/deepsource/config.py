"""
Configurações do módulo DeepSource.
Carrega variáveis de ambiente específicas da paginação da API GraphQL do DeepSource.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class DeepSourcePaginationSettings(BaseSettings):
    """Configurações de paginação para a API GraphQL do DeepSource."""

    deepsource_default_page_size: int = Field(
        default=10,
        ge=1,
        description="Tamanho de página padrão quando nenhum é informado"
    )
    deepsource_multi_page_size: int = Field(
        default=50,
        ge=1,
        description="Tamanho de página usado na busca de múltiplas páginas"
    )
    deepsource_default_max_pages: int = Field(
        default=10,
        ge=1,
        description="Limite padrão de páginas em fetch_multiple_pages"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_pagination_settings() -> DeepSourcePaginationSettings:
    """
    Retorna instância cacheada das configurações de paginação.
    Use esta função para obter as configurações em qualquer lugar do módulo.
    """
    return DeepSourcePaginationSettings()


# Instância global para imports diretos
pagination_settings = get_pagination_settings()
