# src/autoconfig/core/resources/__init__.py
"""
Camada de localização de recursos do autoconfig.

Componentes:
    - base_dir → cálculo do diretório base (arquivos externos)
    - locator  → resolução externo-primeiro com fallback para o embarcado
"""

from .base_dir import BASE_DIR_ENV, compute_base_dir
from .locator import (
    DEFAULT_ANCHOR,
    ConfigSource,
    ResourceLocator,
    SourceKind,
    resolve,
    split_resource_path,
)

__all__ = [
    "BASE_DIR_ENV",
    "DEFAULT_ANCHOR",
    "ConfigSource",
    "ResourceLocator",
    "SourceKind",
    "compute_base_dir",
    "resolve",
    "split_resource_path",
]
