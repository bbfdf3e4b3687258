# src/autoconfig/core/overrides/sources.py
"""
Fontes de override: variáveis de ambiente e propriedades de processo.

As duas tabelas são entradas explícitas e somente leitura do merge.
O merge nunca lê `os.environ` diretamente: recebe um `OverrideSources`,
o que torna a lógica pura e testável sem mutar o processo.

Política de lookup (v1):
    1. variável de ambiente com o nome exato da chave de override
    2. se ausente ou em branco, propriedade de processo com o mesmo nome
    3. se ainda ausente ou em branco, não há override

Valores em branco (vazios ou apenas espaços) são tratados como ausentes.

Propriedades de processo:
    Python não possui propriedades de sistema como a JVM. Este módulo
    mantém uma tabela por processo, alimentada explicitamente pela
    aplicação (ou pela CLI via `-D CHAVE=VALOR`).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


_PROCESS_PROPERTIES: Dict[str, str] = {}


def set_process_property(name: str, value: str) -> None:
    """Define (ou substitui) uma propriedade de processo."""
    _PROCESS_PROPERTIES[name] = value


def get_process_property(name: str) -> Optional[str]:
    """Retorna a propriedade de processo ou None."""
    return _PROCESS_PROPERTIES.get(name)


def clear_process_property(name: Optional[str] = None) -> None:
    """Remove uma propriedade de processo; sem argumento, remove todas."""
    if name is None:
        _PROCESS_PROPERTIES.clear()
    else:
        _PROCESS_PROPERTIES.pop(name, None)


def process_properties() -> Mapping[str, str]:
    """Retorna uma visão somente leitura de uma cópia da tabela atual."""
    return MappingProxyType(dict(_PROCESS_PROPERTIES))


def is_blank(value: Optional[str]) -> bool:
    """True para None, string vazia ou composta apenas por espaços."""
    return value is None or not value.strip()


class OverrideOrigin(str, Enum):
    """Origem de um valor de override aplicado."""
    ENVIRONMENT = "environment"
    PROPERTY = "property"


@dataclass(frozen=True)
class OverrideSources:
    """
    Par ordenado de tabelas consultadas durante o merge.

    Campos:
        - environment: tabela de variáveis de ambiente (precedência maior)
        - properties: tabela de propriedades de processo (consultada
          apenas quando o ambiente não fornece valor não-branco)

    Invariantes:
        - As tabelas nunca são escritas pelo merge
        - A mesma instância sempre produz o mesmo resultado de lookup
    """

    environment: Mapping[str, str] = field(default_factory=dict)
    properties: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_process(cls) -> "OverrideSources":
        """
        Captura um snapshot do ambiente e das propriedades de processo atuais.

        O snapshot é tirado uma vez por chamada de alto nível, de forma que
        alterações concorrentes não afetam um merge em andamento.
        """
        return cls(
            environment=MappingProxyType(dict(os.environ)),
            properties=process_properties(),
        )

    def lookup(self, key: str) -> Optional[Tuple[str, OverrideOrigin]]:
        """
        Resolve o valor de override para a chave informada.

        Returns:
            (valor, origem) quando um valor não-branco existe; None caso contrário.
        """
        value = self.environment.get(key)
        if not is_blank(value):
            return value, OverrideOrigin.ENVIRONMENT

        value = self.properties.get(key)
        if not is_blank(value):
            return value, OverrideOrigin.PROPERTY

        return None
