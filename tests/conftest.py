# tests/conftest.py
"""
Fixtures compartilhados para testes do Galaxy Planner.

Este módulo define fixtures reutilizáveis que fornecem:
- uma árvore de diretórios de namespaces em `tmp_path`
- specs globais mínimas e determinísticas (como dict e como DotGalaxy)
- appliers de gravação, que registram a ordem das chamadas

Decisões arquiteturais:
    - Fixtures são mantidas simples e explícitas
    - I/O acontece apenas sob `tmp_path`
    - Appliers de teste utilizam duck typing em vez de herança

Invariantes:
    - Nenhuma fixture acessa rede, cluster ou Vault
    - Os dados retornados são determinísticos
"""

from pathlib import Path
from typing import Dict, Iterable, List

import pytest


@pytest.fixture
def make_tree(tmp_path: Path):
    """
    Fábrica de árvores `baseDir/<namespace>/<arquivos>`.

    Uso:
        base = make_tree({"app": ["web.yaml", "notes.txt"], "internal": []})

    Returns:
        Callable[[Dict[str, Iterable[str]]], Path]: cria os arquivos e
        devolve o `baseDir`.
    """

    def _make(layout: Dict[str, Iterable[str]], base_name: str = "releases") -> Path:
        base = tmp_path / base_name
        base.mkdir(parents=True, exist_ok=True)
        for namespace, files in layout.items():
            ns_dir = base / namespace
            ns_dir.mkdir(parents=True, exist_ok=True)
            for file_name in files:
                (ns_dir / file_name).write_text(f"# {namespace}/{file_name}\n", encoding="utf-8")
        return base

    return _make


@pytest.fixture
def spec_dict():
    """
    Fábrica do conteúdo de `.galaxy.yaml` como dicionário.

    Os ambientes padrão cobrem os casos mais comuns:
        - dev: transformação identidade
        - prod: sufixo de namespace, prefixo de release, sufixo de arquivo
        - staging: ignora o namespace `internal`
    """

    def _make(base_dir, names=("app", "internal"), environments=None, extensions=(".yaml",)):
        if environments is None:
            environments = [
                {"name": "dev"},
                {
                    "name": "prod",
                    "fileSuffixes": ["-prod"],
                    "transform": {"namespaceSuffix": "-prod", "releasePrefix": "x-"},
                },
                {"name": "staging", "skipOnNamespaces": ["internal"]},
            ]
        return {
            "galaxy": {
                "namespaces": {
                    "baseDir": str(base_dir),
                    "extensions": list(extensions),
                    "names": list(names),
                },
                "environments": environments,
            }
        }

    return _make


@pytest.fixture
def dot_galaxy(make_tree, spec_dict):
    """DotGalaxy padrão sobre uma árvore com `app` e `internal`."""
    from galaxy_planner.core.config.spec import DotGalaxy

    base = make_tree(
        {
            "app": ["web.yaml", "web-prod.yaml", "worker-prod.yaml", "README.txt"],
            "internal": ["metrics.yaml"],
        }
    )
    return DotGalaxy.from_dict(spec_dict(base))


class RecordingApplier:
    """
    Applier de teste que registra cada chamada em uma lista compartilhada.

    Decisões arquiteturais:
        - Implementa o protocolo `Applier` via duck typing
        - `fail_on` permite simular falha em `bootstrap` de um namespace
    """

    def __init__(self, role: str, calls: List[tuple], fail_on: str = ""):
        self.role = role
        self.calls = calls
        self.fail_on = fail_on
        self.current = None

    def bootstrap(self, namespace, original_namespace, dry_run):
        if namespace == self.fail_on:
            raise RuntimeError(f"{self.role} failed on {namespace}")
        self.current = namespace
        self.calls.append((self.role, "bootstrap", namespace, original_namespace, dry_run))

    def apply(self):
        self.calls.append((self.role, "apply", self.current))


@pytest.fixture
def applier_calls() -> List[tuple]:
    return []


@pytest.fixture
def recording_factories(applier_calls):
    """
    Par de fábricas (secrets, releases) que produzem `RecordingApplier`.

    Cada fábrica também registra os argumentos recebidos em `received`,
    permitindo verificar o ambiente e os contextos entregues.
    """
    received: Dict[str, tuple] = {}

    def _factory(role: str, fail_on: str = ""):
        def _build(cfg, environment, contexts):
            received[role] = (cfg, environment, contexts)
            return RecordingApplier(role, applier_calls, fail_on=fail_on)

        return _build

    return _factory, received
