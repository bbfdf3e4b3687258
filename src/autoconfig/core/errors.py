# src/autoconfig/core/errors.py
"""
Exceções canônicas do autoconfig.

Este módulo define a hierarquia oficial de exceções utilizadas durante
a localização de recursos de configuração e a aplicação de overrides
sobre defaults embarcados.

Duas políticas distintas convivem aqui:
    - Localização (Locator): falhas são **propagadas** ao chamador
    - Merge de overrides: falhas são **convertidas** em conteúdo vazio
      em um único ponto (`MergeOutcome.or_empty`), nunca propagadas

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de I/O preservam a causa original (`raise ... from e`)
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções do pacote herdam de `ConfigError`
    - Exceções de localização também herdam do builtin equivalente
      (`ValueError`, `FileNotFoundError`, `OSError`), permitindo captura
      idiomática por código que não conhece o autoconfig

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não registra logs

Este módulo existe para garantir clareza,
consistência e previsibilidade no tratamento de erros de configuração.
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados ao autoconfig.

    Esta hierarquia permite:
        - captura genérica de erros do pacote
        - distinção clara entre falhas de localização e falhas de merge
    """


class ResourceError(ConfigError):
    """
    Exceção base para falhas na resolução de um recurso de configuração.

    Falhas de localização são sempre propagadas ao chamador.
    """


class InvalidResourcePathError(ResourceError, ValueError):
    """
    Exceção levantada quando o caminho solicitado não é um caminho
    relativo válido.

    Regras (v1):
        - O caminho não pode ser vazio
        - O separador é sempre `/` (barras invertidas são rejeitadas)
        - Segmentos `..` são rejeitados (o recurso não pode escapar do
          diretório base nem do pacote âncora)

    Limites explícitos:
        - Não normaliza nem corrige caminhos inválidos
    """


class ResourceNotFoundError(ResourceError, FileNotFoundError):
    """
    Exceção levantada quando nem o arquivo externo nem o recurso
    embarcado existem para o caminho solicitado.

    Decisões arquiteturais:
        - Ausência total do recurso é falha fatal para o chamador
        - Nenhum conteúdo vazio é retornado em seu lugar
    """


class ResourceReadError(ResourceError, OSError):
    """
    Exceção levantada quando o arquivo externo existe mas não pode ser lido
    (permissões, remoção concorrente, etc.).

    Invariantes:
        - A exceção original de I/O é preservada como `__cause__`
        - Nunca há fallback silencioso para o recurso embarcado
    """


class OverrideMergeError(ConfigError):
    """
    Exceção base para falhas durante a aplicação de overrides.

    Estas exceções **nunca** escapam de `merge_yaml`, `merge_properties`
    ou `get_resource`: são capturadas e registradas em um `MergeOutcome`,
    cujo `or_empty()` produz conteúdo vazio.
    """


class OverrideParseError(OverrideMergeError):
    """
    Exceção levantada quando o documento embarcado não pode ser
    interpretado.

    Exemplos:
        - YAML sintaticamente inválido
        - YAML cuja raiz não é um mapeamento (lista, escalar, documento vazio)
        - `.properties` com escapes `\\u` inválidos
    """


class OverrideSerializeError(OverrideMergeError):
    """
    Exceção levantada quando a estrutura com overrides aplicados não pode
    ser serializada de volta para bytes.
    """
