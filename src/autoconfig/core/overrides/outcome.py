# src/autoconfig/core/overrides/outcome.py
"""
Resultado canônico de uma tentativa de merge de overrides.

A política de falha do merge é **soft**: qualquer erro de parse, aplicação
ou serialização resulta em conteúdo vazio para o chamador, nunca em
exceção propagada. Esta conversão acontece em um único ponto,
`MergeOutcome.or_empty()`, e não espalhada em blocos `except` ao longo do
código.

Componentes:
    - AppliedOverride → registro de um valor substituído
    - MergeOutcome    → conteúdo resultante, overrides aplicados e erro

Invariantes:
    - Um outcome com erro nunca carrega conteúdo
    - Valores de override nunca são registrados (podem conter segredos)
    - `or_empty()` de um outcome com erro é sempre `b""`
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .sources import OverrideOrigin


@dataclass(frozen=True)
class AppliedOverride:
    """
    Registro imutável de um override aplicado.

    Campos:
        - config_key: chave pontuada no documento (ex.: `db.host`)
        - override_key: nome consultado (ex.: `DB_HOST`)
        - origin: fonte que forneceu o valor
    """

    config_key: str
    override_key: str
    origin: OverrideOrigin


@dataclass(frozen=True)
class MergeOutcome:
    """
    Resultado imutável de um merge de overrides.

    Campos:
        - content: bytes resultantes (vazio quando há erro)
        - applied: overrides aplicados, na ordem em que foram encontrados
        - error: exceção capturada, ou None em caso de sucesso
    """

    content: bytes = b""
    applied: Tuple[AppliedOverride, ...] = ()
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def overridden(self) -> bool:
        return bool(self.applied)

    @classmethod
    def success(
        cls,
        content: bytes,
        applied: Tuple[AppliedOverride, ...] = (),
    ) -> "MergeOutcome":
        return cls(content=content, applied=tuple(applied))

    @classmethod
    def failure(cls, error: Exception) -> "MergeOutcome":
        return cls(content=b"", applied=(), error=error)

    def or_empty(self) -> bytes:
        """
        Converte o outcome em bytes aplicando a política de falha soft.

        Returns:
            bytes: o conteúdo em caso de sucesso; `b""` em caso de erro.
        """
        if self.error is not None:
            return b""
        return self.content
