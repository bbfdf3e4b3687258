# src/autoconfig/core/__init__.py
"""
Core do autoconfig.

Componentes principais:
    - resources → localização externo-primeiro de recursos de configuração
    - overrides → merge de variáveis de ambiente/propriedades sobre defaults
    - dispatch  → escolha de formato e montagem do conteúdo final
    - errors    → hierarquia canônica de exceções

Princípios fundamentais:
    - Nenhum estado é mantido entre chamadas
    - Arquivos externos são confiáveis e nunca modificados
    - Falhas de merge nunca derrubam o chamador
"""
