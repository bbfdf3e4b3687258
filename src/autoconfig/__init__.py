# src/autoconfig/__init__.py
"""
autoconfig — carregamento de configuração externo-primeiro com overrides
por variáveis de ambiente.

Um recurso de configuração (YAML ou `.properties`) é procurado primeiro ao
lado da aplicação; se não existir, o default embarcado no pacote é usado,
e seus valores textuais podem ser substituídos por variáveis de ambiente
(ou propriedades de processo) de nome derivado: `db.host` → `DB_HOST`.

Uso:
    >>> from autoconfig import get_resource
    >>> stream = get_resource("app-config.yml")

Limites explícitos:
    - Não valida schema
    - Não oferece perfis, reload ou binding tipado
"""

from .core.dispatch import ResourceFormat, get_resource, read_resource, read_resource_text
from .core.errors import (
    ConfigError,
    InvalidResourcePathError,
    OverrideMergeError,
    OverrideParseError,
    OverrideSerializeError,
    ResourceError,
    ResourceNotFoundError,
    ResourceReadError,
)
from .core.overrides import (
    MergeOutcome,
    OverrideSources,
    merge_properties,
    merge_yaml,
    override_key,
    set_process_property,
)
from .core.resources import ConfigSource, ResourceLocator, SourceKind, resolve

__all__ = [
    "ConfigError",
    "ConfigSource",
    "InvalidResourcePathError",
    "MergeOutcome",
    "OverrideMergeError",
    "OverrideParseError",
    "OverrideSerializeError",
    "OverrideSources",
    "ResourceError",
    "ResourceFormat",
    "ResourceLocator",
    "ResourceNotFoundError",
    "ResourceReadError",
    "SourceKind",
    "get_resource",
    "merge_properties",
    "merge_yaml",
    "override_key",
    "read_resource",
    "read_resource_text",
    "resolve",
    "set_process_property",
]
