# src/autoconfig/core/overrides/__init__.py
"""
Camada de overrides do autoconfig.

Este pacote aplica valores de variáveis de ambiente e de propriedades de
processo sobre defaults embarcados em YAML ou `.properties`.

Componentes:
    - keys             → derivação da chave de override (`db.host` → `DB_HOST`)
    - sources          → tabelas de ambiente/propriedades injetáveis
    - outcome          → resultado do merge e política de falha soft
    - yaml_merge       → merge sobre YAML (preserva bytes sem override)
    - properties_merge → merge sobre `.properties` (sempre re-serializa)

Invariantes:
    - O merge nunca escreve no ambiente
    - Apenas valores textuais são elegíveis a override
    - Falhas de merge resultam em conteúdo vazio, nunca em exceção
"""

from .keys import override_key, override_key_for_path
from .outcome import AppliedOverride, MergeOutcome
from .properties_merge import merge_properties, try_merge_properties
from .sources import (
    OverrideOrigin,
    OverrideSources,
    clear_process_property,
    get_process_property,
    process_properties,
    set_process_property,
)
from .yaml_merge import merge_yaml, try_merge_yaml

__all__ = [
    "AppliedOverride",
    "MergeOutcome",
    "OverrideOrigin",
    "OverrideSources",
    "clear_process_property",
    "get_process_property",
    "merge_properties",
    "merge_yaml",
    "override_key",
    "override_key_for_path",
    "process_properties",
    "set_process_property",
    "try_merge_properties",
    "try_merge_yaml",
]
