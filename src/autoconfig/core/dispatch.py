# src/autoconfig/core/dispatch.py
"""
Despachante de alto nível do autoconfig.

Combina o localizador e os merges de override:

    caminho → Locator → externo?   → bytes inalterados
                      → embarcado? → ResourceFormat.from_path(caminho)
                                       YAML        → merge_yaml
                                       PROPERTIES  → merge_properties
                                       PASSTHROUGH → bytes inalterados

Decisões arquiteturais:
    - O formato é escolhido uma única vez, pela extensão do caminho
      (sem diferenciar maiúsculas/minúsculas)
    - Cada variante implementa o mesmo contrato `bytes -> bytes`
    - Overrides **nunca** são aplicados a arquivos externos: o arquivo
      externo já é o mecanismo explícito de override do usuário

Invariantes:
    - Erros do localizador são propagados
    - Erros de merge resultam em conteúdo vazio (checável pelo chamador)
"""

from __future__ import annotations

import io
from enum import Enum
from pathlib import PurePosixPath
from typing import Optional

from .overrides.outcome import MergeOutcome
from .overrides.properties_merge import try_merge_properties
from .overrides.sources import OverrideSources
from .overrides.yaml_merge import try_merge_yaml
from .resources.locator import ResourceLocator


class ResourceFormat(str, Enum):
    """Família de formato de um recurso, escolhida pela extensão."""
    YAML = "yaml"
    PROPERTIES = "properties"
    PASSTHROUGH = "passthrough"

    @classmethod
    def from_path(cls, path: str) -> "ResourceFormat":
        suffix = PurePosixPath(path).suffix.lower()
        if suffix in {".yml", ".yaml"}:
            return cls.YAML
        if suffix == ".properties":
            return cls.PROPERTIES
        return cls.PASSTHROUGH

    def try_merge(self, data: bytes, sources: OverrideSources) -> MergeOutcome:
        if self is ResourceFormat.YAML:
            return try_merge_yaml(data, sources)
        if self is ResourceFormat.PROPERTIES:
            return try_merge_properties(data, sources)
        return MergeOutcome.success(data)

    def merge(self, data: bytes, sources: OverrideSources) -> bytes:
        return self.try_merge(data, sources).or_empty()


def read_resource(
    path: str,
    *,
    locator: Optional[ResourceLocator] = None,
    sources: Optional[OverrideSources] = None,
) -> bytes:
    """
    Resolve `path` e retorna os bytes finais, com overrides quando aplicável.

    Args:
        path: caminho relativo do recurso (ex.: `app-config.yml`).
        locator: localizador; por padrão `ResourceLocator()`.
        sources: fontes de override; por padrão, snapshot do processo.

    Returns:
        bytes: conteúdo final. Vazio quando o merge de um embarcado falha.

    Raises:
        InvalidResourcePathError: caminho inválido.
        ResourceNotFoundError: recurso inexistente.
        ResourceReadError: arquivo externo ilegível.
    """
    source = (locator or ResourceLocator()).resolve(path)
    if source.is_external:
        return source.read_bytes()

    if sources is None:
        sources = OverrideSources.from_process()
    return ResourceFormat.from_path(path).merge(source.read_bytes(), sources)


def get_resource(
    path: str,
    *,
    locator: Optional[ResourceLocator] = None,
    sources: Optional[OverrideSources] = None,
) -> io.BytesIO:
    """Como `read_resource`, mas retorna um stream em memória."""
    return io.BytesIO(read_resource(path, locator=locator, sources=sources))


def read_resource_text(
    path: str,
    encoding: str = "utf-8",
    *,
    locator: Optional[ResourceLocator] = None,
    sources: Optional[OverrideSources] = None,
) -> str:
    """Como `read_resource`, decodificando o conteúdo."""
    return read_resource(path, locator=locator, sources=sources).decode(encoding)
