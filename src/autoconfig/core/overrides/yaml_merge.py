# src/autoconfig/core/overrides/yaml_merge.py
"""
Merge de overrides sobre documentos YAML embarcados.

Este módulo aplica valores de variáveis de ambiente (e propriedades de
processo) sobre as folhas textuais de um documento YAML de defaults.

Política de merge (v1):
    - o documento deve ter um mapeamento na raiz
    - o percurso é em profundidade, na ordem nativa das chaves
    - apenas folhas do tipo `str` são elegíveis a override
    - números, booleanos, null e listas nunca são substituídos
      (limitação conhecida, não uma coerção silenciosa)
    - listas não são percorridas
    - nós compartilhados por âncoras, aliases ou `<<:` são copiados após o
      parse, de forma que cada caminho recebe seu próprio valor

Política de saída:
    - nenhum override aplicado → os bytes de entrada são retornados
      inalterados (byte a byte, preservando comentários e formatação)
    - ao menos um override → o documento inteiro é re-serializado;
      comentários e formatação original são **perdidos** (trade-off aceito)

Política de falha:
    - qualquer erro de parse, aplicação ou serialização resulta em `b""`
      via `MergeOutcome.or_empty()`; nenhuma exceção escapa de `merge_yaml`

Limites explícitos:
    - Não valida schema
    - Não resolve perfis ou múltiplos documentos
    - Não lê `os.environ` diretamente quando `sources` é fornecido
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import yaml  # PyYAML

from ..errors import OverrideParseError, OverrideSerializeError
from .keys import join_config_path, override_key
from .outcome import AppliedOverride, MergeOutcome
from .sources import OverrideSources

logger = logging.getLogger(__name__)


def _parse(data: bytes) -> Dict[Any, Any]:
    try:
        tree = yaml.safe_load(data)
    except Exception as e:
        raise OverrideParseError(f"YAML inválido: {e}") from e

    if not isinstance(tree, dict):
        raise OverrideParseError(
            f"Raiz do YAML deve ser um mapeamento, recebido: {type(tree).__name__}"
        )
    return _unshare(tree)


def _unshare(node: Any) -> Any:
    """
    Reconstrói mapeamentos e listas para que nenhum nó seja compartilhado.

    Âncoras, aliases e chaves de merge (`<<:`) fazem o `safe_load` reusar
    o mesmo objeto em vários pontos da árvore; sem esta cópia, um override
    em um caminho alteraria todos os aliases.
    """
    if isinstance(node, dict):
        return {key: _unshare(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_unshare(item) for item in node]
    return node


def _serialize(tree: Dict[Any, Any]) -> bytes:
    try:
        text = yaml.safe_dump(
            tree,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
    except Exception as e:
        raise OverrideSerializeError(f"Falha ao serializar YAML: {e}") from e
    return text.encode("utf-8")


def apply_overrides_to_tree(
    tree: Dict[Any, Any],
    sources: OverrideSources,
    _prefix: Sequence[Any] = (),
) -> List[AppliedOverride]:
    """
    Aplica overrides recursivamente sobre um mapeamento, mutando-o in place.

    Para cada folha textual, a chave de override é derivada do caminho
    completo da raiz até a folha (ex.: `["db", "host"]` → `DB_HOST`) e
    consultada em `sources`. Mapeamentos aninhados são percorridos antes
    do próximo irmão.

    Args:
        tree: mapeamento a ser mutado.
        sources: tabelas de ambiente e propriedades.

    Returns:
        List[AppliedOverride]: overrides aplicados, na ordem do percurso.
    """
    applied: List[AppliedOverride] = []

    for key, value in tree.items():
        path = (*_prefix, key)

        if isinstance(value, dict):
            applied.extend(apply_overrides_to_tree(value, sources, path))
            continue

        if not isinstance(value, str):
            continue

        config_key = join_config_path(path)
        env_key = override_key(config_key)
        found = sources.lookup(env_key)
        if found is None:
            continue

        new_value, origin = found
        logger.debug(
            "Override %s encontrado (%s), substituindo YAML %s",
            env_key,
            origin.value,
            config_key,
        )
        tree[key] = new_value
        applied.append(AppliedOverride(config_key, env_key, origin))

    return applied


def try_merge_yaml(
    data: bytes,
    sources: Optional[OverrideSources] = None,
) -> MergeOutcome:
    """
    Executa o merge YAML e retorna o outcome completo, incluindo erros.

    Args:
        data: bytes do documento YAML embarcado.
        sources: fontes de override; quando None, captura o processo atual.

    Returns:
        MergeOutcome: conteúdo, overrides aplicados e erro (se houver).
    """
    if sources is None:
        sources = OverrideSources.from_process()

    try:
        tree = _parse(data)
        applied = apply_overrides_to_tree(tree, sources)
        if not applied:
            return MergeOutcome.success(data)
        return MergeOutcome.success(_serialize(tree), tuple(applied))
    except Exception as e:  # falha soft: convertida em b"" por or_empty()
        logger.warning("Falha ao aplicar overrides sobre YAML: %s", e)
        return MergeOutcome.failure(e)


def merge_yaml(data: bytes, sources: Optional[OverrideSources] = None) -> bytes:
    """
    Aplica overrides sobre um YAML embarcado e retorna os bytes finais.

    Returns:
        bytes: os bytes originais (sem override), o YAML re-serializado
        (com override) ou `b""` (falha).
    """
    return try_merge_yaml(data, sources).or_empty()
