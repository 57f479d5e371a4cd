# src/galaxy_planner/core/config/run_config.py
"""
Configuração de runtime do Galaxy Planner.

`RunConfig` reúne o escopo requisitado para uma execução (ambientes e
namespaces), os modos de execução (dry-run, skip de secrets) e as
configurações opacas repassadas aos appliers externos.

Decisões arquiteturais:
    - Ambientes e namespaces chegam como listas separadas por vírgula
    - Lista vazia significa "todos os declarados"
    - `kubernetes`, `landscaper` e `vault` nunca são interpretados pelo core
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


def split_comma_list(value: str) -> List[str]:
    """Quebra `value` por vírgula, descartando itens vazios e preservando a ordem."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class RunConfig:
    """Configuração de runtime de uma execução."""

    dot_galaxy_path: str = ".galaxy.yaml"
    dry_run: bool = False
    environments: str = ""
    namespaces: str = ""
    log_level: str = "error"
    skip_secrets: bool = False

    kubernetes: Dict[str, Any] = field(default_factory=dict)
    landscaper: Dict[str, Any] = field(default_factory=dict)
    vault: Dict[str, Any] = field(default_factory=dict)

    def get_environments(self) -> List[str]:
        return split_comma_list(self.environments)

    def get_namespaces(self) -> List[str]:
        return split_comma_list(self.namespaces)
