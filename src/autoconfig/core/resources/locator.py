# src/autoconfig/core/resources/locator.py
"""
Localizador canônico de recursos de configuração.

Dado um caminho relativo (ex.: `app-config.yml`), decide se existe uma
cópia **externa** no diretório base da aplicação; se existir, ela é lida
diretamente. Caso contrário, o recurso **embarcado** de mesmo caminho
relativo dentro do pacote âncora é lido.

Política de resolução (v1):
    - externo existe (arquivo regular) → `SourceKind.EXTERNAL`
    - senão, embarcado existe          → `SourceKind.BUNDLED`
    - senão                            → `ResourceNotFoundError`

Decisões arquiteturais:
    - O conteúdo é lido por completo durante a resolução; o arquivo é
      aberto e fechado dentro da chamada em todos os caminhos de saída
    - Falhas de leitura do externo nunca caem para o embarcado
    - Arquivos externos nunca passam por merge de overrides

Invariantes:
    - `ConfigSource` é imutável
    - Nenhum estado é mantido entre chamadas

Limites explícitos:
    - Não interpreta o conteúdo
    - Não aplica overrides
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from importlib import resources
from pathlib import Path
from typing import Any, Optional, Tuple

from ..errors import (
    InvalidResourcePathError,
    ResourceError,
    ResourceNotFoundError,
    ResourceReadError,
)
from .base_dir import compute_base_dir

logger = logging.getLogger(__name__)

DEFAULT_ANCHOR = "autoconfig.bundled"


class SourceKind(str, Enum):
    """Origem de um recurso resolvido."""
    EXTERNAL = "external"
    BUNDLED = "bundled"


@dataclass(frozen=True)
class ConfigSource:
    """
    Recurso de configuração resolvido.

    Campos:
        - path: caminho relativo solicitado
        - kind: origem (externo ou embarcado)
        - location: `Path` do arquivo externo ou `Traversable` do recurso
          embarcado
        - content: bytes lidos durante a resolução
    """

    path: str
    kind: SourceKind
    location: Any
    content: bytes = field(default=b"", repr=False)

    @property
    def is_external(self) -> bool:
        return self.kind is SourceKind.EXTERNAL

    def read_bytes(self) -> bytes:
        return self.content


def split_resource_path(path: str) -> Tuple[str, ...]:
    """
    Valida e divide um caminho de recurso em segmentos.

    Uma barra inicial (estilo classpath) é ignorada; segmentos vazios e `.`
    são descartados.

    Raises:
        InvalidResourcePathError: caminho vazio, com `\\` ou com `..`.
    """
    if not isinstance(path, str) or not path.strip():
        raise InvalidResourcePathError("Caminho de recurso vazio")
    if "\\" in path:
        raise InvalidResourcePathError(f"Caminho de recurso deve usar '/': {path}")

    parts = tuple(p for p in path.split("/") if p not in ("", "."))
    if not parts:
        raise InvalidResourcePathError(f"Caminho de recurso vazio: {path!r}")
    if ".." in parts:
        raise InvalidResourcePathError(f"Caminho de recurso não pode conter '..': {path}")
    return parts


@dataclass(frozen=True)
class ResourceLocator:
    """
    Resolve recursos de configuração, priorizando cópias externas.

    Campos:
        - anchor: pacote que embarca os recursos padrão
        - base_dir: diretório de arquivos externos; quando None, é
          calculado por `compute_base_dir` a cada resolução
    """

    anchor: str = DEFAULT_ANCHOR
    base_dir: Optional[Path] = None

    def resolved_base_dir(self) -> Path:
        return compute_base_dir(self.anchor, self.base_dir)

    def external_path(self, path: str) -> Path:
        return self.resolved_base_dir().joinpath(*split_resource_path(path))

    def _bundled(self, parts: Tuple[str, ...]) -> Any:
        try:
            node = resources.files(self.anchor)
        except ModuleNotFoundError as e:
            raise ResourceError(f"Pacote âncora não encontrado: {self.anchor}") from e

        for part in parts:
            node = node / part
        return node

    def resolve(self, path: str) -> ConfigSource:
        """
        Resolve e lê o recurso indicado por `path`.

        Returns:
            ConfigSource: recurso externo ou embarcado, já lido.

        Raises:
            InvalidResourcePathError: caminho inválido.
            ResourceNotFoundError: nem externo nem embarcado existem.
            ResourceReadError: o externo existe mas não pôde ser lido.
        """
        parts = split_resource_path(path)
        external = self.resolved_base_dir().joinpath(*parts)
        logger.debug("Verificando arquivo externo: %s", external)

        if external.is_file():
            logger.debug("Lendo arquivo externo: %s", external)
            try:
                content = external.read_bytes()
            except OSError as e:
                raise ResourceReadError(
                    f"Falha ao ler arquivo externo {external}: {e}"
                ) from e
            return ConfigSource(path, SourceKind.EXTERNAL, external, content)

        bundled = self._bundled(parts)
        if not bundled.is_file():
            raise ResourceNotFoundError(
                f"Recurso não encontrado: {path} "
                f"(externo: {external}, embarcado: {self.anchor})"
            )

        logger.debug("Lendo recurso embarcado: %s/%s", self.anchor, "/".join(parts))
        try:
            content = bundled.read_bytes()
        except OSError as e:
            raise ResourceReadError(f"Falha ao ler recurso embarcado {path}: {e}") from e
        return ConfigSource(path, SourceKind.BUNDLED, bundled, content)


def resolve(path: str, locator: Optional[ResourceLocator] = None) -> ConfigSource:
    """Resolve `path` com o localizador informado (ou o padrão)."""
    return (locator or ResourceLocator()).resolve(path)
