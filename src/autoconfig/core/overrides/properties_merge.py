# src/autoconfig/core/overrides/properties_merge.py
"""Merge de overrides sobre arquivos `.properties` embarcados.

Notas:
- O formato é plano: `chave=valor`, com chaves pontuadas por convenção.
- A leitura usa ISO-8859-1, a codificação padrão de `.properties`.
- O resultado é sempre re-serializado, mesmo sem override; a serialização
  omite o comentário de timestamp para ser determinística.
- Comentários e a formatação original não são preservados.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

import javaproperties

from ..errors import OverrideParseError, OverrideSerializeError
from .keys import override_key
from .outcome import AppliedOverride, MergeOutcome
from .sources import OverrideSources

logger = logging.getLogger(__name__)

PROPERTIES_ENCODING = "iso-8859-1"


def _parse(data: bytes) -> Dict[str, str]:
    try:
        return javaproperties.loads(data.decode(PROPERTIES_ENCODING))
    except Exception as e:
        raise OverrideParseError(f".properties inválido: {e}") from e


def _serialize(props: Dict[str, str]) -> bytes:
    try:
        text = javaproperties.dumps(props, timestamp=False)
        return text.encode(PROPERTIES_ENCODING)
    except Exception as e:
        raise OverrideSerializeError(f"Falha ao serializar .properties: {e}") from e


def apply_overrides_to_properties(
    props: Dict[str, str],
    sources: OverrideSources,
) -> List[AppliedOverride]:
    """Aplica overrides in place sobre o mapa plano de propriedades."""
    applied: List[AppliedOverride] = []

    for key in props:
        env_key = override_key(key)
        found = sources.lookup(env_key)
        if found is None:
            continue

        new_value, origin = found
        logger.debug(
            "Override %s encontrado (%s), substituindo properties %s",
            env_key,
            origin.value,
            key,
        )
        props[key] = new_value
        applied.append(AppliedOverride(key, env_key, origin))

    return applied


def try_merge_properties(
    data: bytes,
    sources: Optional[OverrideSources] = None,
) -> MergeOutcome:
    """Executa o merge de `.properties` e retorna o outcome completo."""
    if sources is None:
        sources = OverrideSources.from_process()

    try:
        props = _parse(data)
        applied = apply_overrides_to_properties(props, sources)
        return MergeOutcome.success(_serialize(props), tuple(applied))
    except Exception as e:  # falha soft: convertida em b"" por or_empty()
        logger.warning("Falha ao aplicar overrides sobre properties: %s", e)
        return MergeOutcome.failure(e)


def merge_properties(data: bytes, sources: Optional[OverrideSources] = None) -> bytes:
    """Aplica overrides sobre um `.properties` embarcado; `b""` em caso de falha."""
    return try_merge_properties(data, sources).or_empty()
