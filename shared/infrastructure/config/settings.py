"""
Configurações globais da integração DeepSource.
Carrega variáveis de ambiente comuns a todos os módulos.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Configurações da aplicação carregadas do ambiente."""

    # Aplicação
    app_name: str = "DeepSource MCP"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = Field(
        default="INFO",
        description="Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Retorna instância cacheada das configurações.
    Use esta função para obter as configurações em qualquer lugar da aplicação.
    """
    return Settings()
