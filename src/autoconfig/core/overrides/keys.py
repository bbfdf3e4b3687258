# src/autoconfig/core/overrides/keys.py
"""
Derivação canônica de chaves de override.

Uma chave de override é o nome de variável de ambiente (ou propriedade de
processo) consultado para substituir um valor de configuração.

Regra de derivação (v1):
    - os segmentos do caminho são unidos com `.`
    - o resultado é convertido para maiúsculas
    - cada `.` é substituído por `_`

Exemplos:
    - ["db", "host"]          → "DB_HOST"
    - ["db-pool", "size"]     → "DB-POOL_SIZE"
    - "spring.datasource.url" → "SPRING_DATASOURCE_URL"

Limites explícitos:
    - Nenhum outro caractere é transformado (hífens, `:` e segmentos
      iniciados por dígito são preservados como estão)
"""

from __future__ import annotations

from typing import Any, Iterable


def join_config_path(segments: Iterable[Any]) -> str:
    """Une os segmentos de um caminho de configuração com `.`."""
    return ".".join(str(segment) for segment in segments)


def override_key(config_key: str) -> str:
    """
    Deriva a chave de override a partir de uma chave pontuada.

    Args:
        config_key: chave completa, ex.: `db.host`.

    Returns:
        str: nome a consultar no ambiente, ex.: `DB_HOST`.
    """
    return config_key.upper().replace(".", "_")


def override_key_for_path(segments: Iterable[Any]) -> str:
    """
    Deriva a chave de override a partir da sequência de chaves da raiz
    até a folha.

    Segmentos não textuais (ex.: chaves inteiras em YAML) são convertidos
    com `str()` antes da junção.
    """
    return override_key(join_config_path(segments))
