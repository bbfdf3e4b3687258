# tests/core/overrides/test_properties_merge.py
"""
Testes do merge de overrides sobre `.properties` embarcado.

Os testes asseguram que:
- o resultado é sempre re-serializado (mesmo sem override)
- a saída sem override é idêntica a uma serialização nova do mapa original
- o ambiente tem precedência sobre propriedades de processo
- falhas de parse resultam em `b""`
"""

import javaproperties

from autoconfig.core.errors import OverrideParseError, OverrideSerializeError
from autoconfig.core.overrides.properties_merge import (
    merge_properties,
    try_merge_properties,
)
from autoconfig.core.overrides.sources import OverrideOrigin, OverrideSources


def _parse(data: bytes) -> dict:
    return javaproperties.loads(data.decode("iso-8859-1"))


def test_no_override_matches_fresh_serialization(app_properties, no_overrides):
    out = merge_properties(app_properties, no_overrides)

    fresh = javaproperties.dumps(_parse(app_properties), timestamp=False)
    assert out == fresh.encode("iso-8859-1")
    assert b"#" not in out
    assert _parse(out) == {"app.name": "demo", "db.host": "localhost", "db.port": "5432"}


def test_output_is_deterministic(app_properties, no_overrides):
    assert merge_properties(app_properties, no_overrides) == merge_properties(
        app_properties, no_overrides
    )


def test_override_replaces_matching_key(app_properties):
    sources = OverrideSources(environment={"DB_HOST": "prod.example.com"})
    outcome = try_merge_properties(app_properties, sources)

    assert outcome.ok
    assert _parse(outcome.content) == {
        "app.name": "demo",
        "db.host": "prod.example.com",
        "db.port": "5432",
    }
    assert [a.config_key for a in outcome.applied] == ["db.host"]


def test_every_key_is_override_eligible(app_properties):
    # em .properties todos os valores são texto, inclusive números
    sources = OverrideSources(environment={"DB_PORT": "6543"})
    assert _parse(merge_properties(app_properties, sources))["db.port"] == "6543"


def test_insertion_order_is_preserved(app_properties):
    sources = OverrideSources(environment={"APP_NAME": "svc"})
    assert list(_parse(merge_properties(app_properties, sources))) == [
        "app.name",
        "db.host",
        "db.port",
    ]


def test_environment_beats_property(app_properties):
    sources = OverrideSources(
        environment={"APP_NAME": "from-env"},
        properties={"APP_NAME": "from-prop"},
    )
    outcome = try_merge_properties(app_properties, sources)
    assert _parse(outcome.content)["app.name"] == "from-env"
    assert outcome.applied[0].origin is OverrideOrigin.ENVIRONMENT


def test_blank_environment_uses_property(app_properties):
    sources = OverrideSources(
        environment={"APP_NAME": ""},
        properties={"APP_NAME": "from-prop"},
    )
    outcome = try_merge_properties(app_properties, sources)
    assert _parse(outcome.content)["app.name"] == "from-prop"
    assert outcome.applied[0].origin is OverrideOrigin.PROPERTY


def test_java_separators_and_escapes_are_understood():
    data = b"server.port : 8080\nserver.host  localhost\ngreeting=ol\\u00e1\n"
    sources = OverrideSources(environment={"SERVER_HOST": "0.0.0.0"})
    assert _parse(merge_properties(data, sources)) == {
        "server.port": "8080",
        "server.host": "0.0.0.0",
        "greeting": "olá",
    }


def test_non_ascii_values_are_escaped_on_output():
    sources = OverrideSources(environment={"CITY": "São Paulo"})
    out = merge_properties(b"city=Lisbon\n", sources)
    out.decode("ascii")
    assert _parse(out) == {"city": "São Paulo"}


def test_invalid_escape_yields_empty_bytes():
    outcome = try_merge_properties(b"broken=\\uZZZZ\n", OverrideSources())

    assert not outcome.ok
    assert isinstance(outcome.error, OverrideParseError)
    assert merge_properties(b"broken=\\uZZZZ\n", OverrideSources()) == b""


def test_serialization_failure_yields_empty_bytes(monkeypatch, app_properties):
    """
    Verifica a política de falha soft no caminho de serialização.

    Decisões arquiteturais:
        - Falhas de `javaproperties.dumps` são encapsuladas em
          `OverrideSerializeError`
        - A conversão para `b""` ocorre em `MergeOutcome.or_empty()`

    Invariantes:
        - Nenhuma exceção escapa de `merge_properties`

    Limites explícitos:
        - Não valida o conteúdo da mensagem de erro
    """

    def broken_dumps(*args, **kwargs):
        raise TypeError("cannot serialize")

    monkeypatch.setattr(javaproperties, "dumps", broken_dumps)

    outcome = try_merge_properties(app_properties, OverrideSources())

    assert isinstance(outcome.error, OverrideSerializeError)
    assert merge_properties(app_properties, OverrideSources()) == b""
