# src/autoconfig/core/resources/base_dir.py
"""
Cálculo do diretório base da aplicação.

O diretório base é onde arquivos de configuração **externos** são
procurados: arquivos colocados ali substituem integralmente os defaults
embarcados no pacote.

Política de resolução (v1), em ordem de precedência:
    1. `base_dir` explícito
    2. variável de ambiente `AUTOCONFIG_BASE_DIR` (não-branca)
    3. executável congelado (`sys.frozen`) → diretório do executável
    4. pacote âncora dentro de um arquivo (zipapp `.pyz`, zip, egg) →
       diretório que contém o arquivo
    5. pacote âncora em arquivos soltos → diretório que contém o pacote
       de topo; em layout `src/`, a raiz do projeto

Decisões arquiteturais:
    - Nenhuma suposição sobre o diretório de trabalho corrente
    - Toda manipulação de caminhos usa `pathlib` (sem prefixos de URL,
      barras iniciais espúrias ou letras de drive)
"""

from __future__ import annotations

import importlib.util
import logging
import os
import sys
import zipfile
from pathlib import Path
from typing import Mapping, Optional

from ..errors import ResourceError

logger = logging.getLogger(__name__)

BASE_DIR_ENV = "AUTOCONFIG_BASE_DIR"

# diretórios de layout de código-fonte removidos no caso de arquivos soltos
_SOURCE_LAYOUT_DIRS = frozenset({"src"})


def find_containing_archive(path: Path) -> Optional[Path]:
    """Retorna o arquivo zip que contém `path` (ou é o próprio `path`), se houver."""
    for candidate in (path, *path.parents):
        if candidate.is_file() and zipfile.is_zipfile(candidate):
            return candidate
    return None


def anchor_location(anchor: str) -> Path:
    """
    Localiza no sistema de arquivos o pacote de topo do pacote âncora.

    Raises:
        ResourceError: se o pacote não puder ser localizado.
    """
    top_level = anchor.split(".")[0]
    spec = importlib.util.find_spec(top_level)
    if spec is None:
        raise ResourceError(f"Pacote âncora não encontrado: {anchor}")

    if spec.submodule_search_locations:
        return Path(list(spec.submodule_search_locations)[0])
    if spec.origin:
        return Path(spec.origin)

    raise ResourceError(f"Pacote âncora sem localização: {anchor}")


def compute_base_dir(
    anchor: str,
    base_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """
    Calcula o diretório base onde arquivos externos são procurados.

    Args:
        anchor: pacote que embarca os recursos padrão.
        base_dir: diretório explícito (precedência máxima).
        environ: tabela de ambiente; por padrão `os.environ`.

    Returns:
        Path: diretório base absoluto.
    """
    if base_dir is not None:
        return Path(base_dir)

    env = os.environ if environ is None else environ
    from_env = env.get(BASE_DIR_ENV)
    if from_env and from_env.strip():
        logger.debug("Diretório base definido via %s: %s", BASE_DIR_ENV, from_env)
        return Path(from_env.strip()).expanduser()

    if getattr(sys, "frozen", False):
        result = Path(sys.executable).resolve().parent
        logger.debug("Diretório base (executável congelado): %s", result)
        return result

    location = anchor_location(anchor)

    archive = find_containing_archive(location)
    if archive is not None:
        result = archive.resolve().parent
        logger.debug("Diretório base (arquivo %s): %s", archive.name, result)
        return result

    result = location.resolve().parent
    if result.name in _SOURCE_LAYOUT_DIRS:
        result = result.parent
    logger.debug("Diretório base (arquivos soltos): %s", result)
    return result
