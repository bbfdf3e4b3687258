# src/autoconfig/cli.py
"""Ponto de entrada demonstrativo: resolve um recurso e imprime seu texto."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .core.dispatch import read_resource
from .core.errors import ResourceError
from .core.overrides.sources import set_process_property
from .core.resources.locator import DEFAULT_ANCHOR, ResourceLocator

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "AUTOCONFIG_LOG_LEVEL"
DEFAULT_RESOURCE = "test-config.yml"


def _define(value: str) -> Tuple[str, str]:
    name, sep, prop = value.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"esperado CHAVE=VALOR, recebido: {value!r}")
    return name.strip(), prop


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="autoconfig",
        description="Resolve um recurso de configuração (externo ou embarcado) e imprime o conteúdo final",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=DEFAULT_RESOURCE,
        help=f"Caminho relativo do recurso (padrão: {DEFAULT_RESOURCE})",
    )
    parser.add_argument(
        "-D",
        "--define",
        dest="defines",
        action="append",
        type=_define,
        default=[],
        metavar="CHAVE=VALOR",
        help="Define uma propriedade de processo (pode ser repetido)",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        default=None,
        help="Diretório onde arquivos externos são procurados",
    )
    parser.add_argument(
        "--anchor",
        default=DEFAULT_ANCHOR,
        help=f"Pacote que embarca os recursos padrão (padrão: {DEFAULT_ANCHOR})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Nível de log (padrão: ${LOG_LEVEL_ENV} ou WARNING)",
    )
    return parser


def _log_level(explicit: Optional[str]) -> str:
    if explicit:
        return explicit
    level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if level in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return level
    return "WARNING"


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=_log_level(args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    defines: List[Tuple[str, str]] = args.defines
    for name, value in defines:
        set_process_property(name, value)

    locator = ResourceLocator(anchor=args.anchor, base_dir=args.base_dir)
    try:
        content = read_resource(args.path, locator=locator)
    except (ResourceError, OSError) as e:
        logger.error("%s", e)
        return 1

    if not content:
        logger.warning("Nenhuma configuração disponível para %s", args.path)
        return 0

    sys.stdout.write(content.decode("utf-8", errors="replace"))
    if not content.endswith(b"\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
