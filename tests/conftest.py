# tests/conftest.py
"""
Fixtures compartilhados para testes do autoconfig.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos YAML e `.properties` de defaults determinísticos
- fontes de override injetáveis (sem mutar `os.environ`)
- um pacote âncora temporário com recursos embarcados
- um diretório base isolado para arquivos externos

Decisões arquiteturais:
    - Merges são testados com `OverrideSources` explícito sempre que possível
    - Testes que exercitam o ambiente real usam `monkeypatch`
    - A tabela de propriedades de processo é limpa antes e depois de cada teste

Invariantes:
    - Nenhuma fixture escreve fora de `tmp_path`
    - Nenhum estado vaza entre testes
"""

import importlib
import uuid
from pathlib import Path

import pytest

from autoconfig.core.overrides.sources import OverrideSources, clear_process_property
from autoconfig.core.resources.base_dir import BASE_DIR_ENV
from autoconfig.core.resources.locator import ResourceLocator


DB_CONFIG_YAML = b"""\
# defaults do banco
db:
  host: localhost
  port: "5432"
  pool:
    size: 10
    enabled: true
app:
  name: demo
  tags:
    - a
    - b
"""

APP_PROPERTIES = b"""\
# defaults da aplicacao
app.name=demo
db.host=localhost
db.port=5432
"""


@pytest.fixture(autouse=True)
def _isolated_process(monkeypatch):
    """Garante ambiente previsível: sem base dir via env e sem propriedades de processo."""
    monkeypatch.delenv(BASE_DIR_ENV, raising=False)
    clear_process_property()
    yield
    clear_process_property()


@pytest.fixture
def db_config_yaml() -> bytes:
    """YAML de defaults com mapeamentos aninhados, escalares não textuais e lista."""
    return DB_CONFIG_YAML


@pytest.fixture
def app_properties() -> bytes:
    """`.properties` de defaults com chaves pontuadas."""
    return APP_PROPERTIES


@pytest.fixture
def no_overrides() -> OverrideSources:
    return OverrideSources()


@pytest.fixture
def bundle_factory(tmp_path: Path, monkeypatch):
    """
    Fixture factory que cria um pacote âncora temporário importável.

    O pacote recebe um nome único por chamada, evitando colisões com
    módulos já importados em `sys.modules`.

    Returns:
        callable: `make(files: dict[str, bytes]) -> str` que retorna o nome
        do pacote âncora.
    """
    packages_root = tmp_path / "site"
    packages_root.mkdir()
    monkeypatch.syspath_prepend(str(packages_root))

    def make(files):
        name = f"acfg_bundle_{uuid.uuid4().hex[:10]}"
        pkg = packages_root / name
        pkg.mkdir()
        (pkg / "__init__.py").write_text("", encoding="utf-8")
        for rel, content in files.items():
            target = pkg.joinpath(*rel.split("/"))
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)
        importlib.invalidate_caches()
        return name

    return make


@pytest.fixture
def external_dir(tmp_path: Path) -> Path:
    """Diretório base vazio para arquivos externos."""
    d = tmp_path / "deploy"
    d.mkdir()
    return d


@pytest.fixture
def locator_for(external_dir: Path):
    """Cria um `ResourceLocator` com o diretório base isolado."""

    def make(anchor: str) -> ResourceLocator:
        return ResourceLocator(anchor=anchor, base_dir=external_dir)

    return make
