# src/galaxy_planner/core/traceability/plan_manifest.py
"""
Manifest de plano: registro auditável do resultado de `Galaxy.plan()`.

O manifest consolida, de forma determinística e serializável:
    - metadados da execução (versão, timestamp, dry-run)
    - entradas (hash da spec global, escopo requisitado)
    - por ambiente: contextos modificados e mapa de namespaces originais
    - cópia do Event Log do orquestrador

Decisões arquiteturais:
    - UTC é o timezone canônico dos timestamps
    - O formato de persistência é JSON com chaves ordenadas
    - O hash do plano ignora `run` e `events`: duas execuções sobre a
      mesma árvore de diretórios produzem o mesmo hash

Invariantes:
    - A ordem de namespaces e arquivos é a ordem produzida pelo planner
    - O manifest é reconstruível via round-trip (`save` → `load`)

Limites explícitos:
    - Não executa planejamento nem apply
    - Não valida semântica de domínio ao carregar
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from galaxy_planner import __version__
from galaxy_planner.core.config.hashing import compute_spec_hash
from galaxy_planner.core.engine.galaxy import Galaxy


def _iso_utc(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc).isoformat()


@dataclass
class PlanManifest:
    """
    Registro serializável de um plano.

    Campos principais:
        - run: galaxy_version, created_at, dry_run
        - inputs: spec_hash, environments e namespaces requisitados
        - environments: `{env: {"contexts": [...], "original_namespaces": {...}}}`
        - events: Event Log do orquestrador no momento da criação
    """

    run: Dict[str, Any]
    inputs: Dict[str, Any]
    environments: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "run": dict(self.run),
            "inputs": json.loads(json.dumps(self.inputs)),
            "environments": json.loads(json.dumps(self.environments)),
            "events": [dict(e) for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlanManifest":
        return cls(
            run=dict(data.get("run", {})),
            inputs=dict(data.get("inputs", {})),
            environments={k: dict(v) for k, v in (data.get("environments", {}) or {}).items()},
            events=[dict(e) for e in (data.get("events", []) or [])],
        )


def create_plan_manifest(galaxy: Galaxy, *, created_at: datetime) -> PlanManifest:
    """
    Cria o manifest a partir do estado planejado de `galaxy`.

    A ordem dos ambientes segue a ordem declarada no `.galaxy.yaml`;
    ambientes não planejados não aparecem.
    """
    environments: Dict[str, Dict[str, Any]] = {}
    for env in galaxy.dot_galaxy.list_environments():
        if env not in galaxy.modified:
            continue
        environments[env] = {
            "contexts": [ctx.to_dict() for ctx in galaxy.modified[env]],
            "original_namespaces": dict(galaxy.env_original_ns.get(env, {})),
        }

    return PlanManifest(
        run={
            "galaxy_version": __version__,
            "created_at": _iso_utc(created_at),
            "dry_run": galaxy.cfg.dry_run,
        },
        inputs={
            "spec_hash": compute_spec_hash(galaxy.dot_galaxy.to_dict()),
            "environments": galaxy.cfg.get_environments(),
            "namespaces": galaxy.cfg.get_namespaces(),
        },
        environments=environments,
        events=[dict(e) for e in galaxy.events],
    )


def compute_plan_hash(manifest: PlanManifest) -> str:
    """Hash do conteúdo planejado (inputs + environments), sem timestamps nem eventos."""
    data = manifest.to_dict()
    return compute_spec_hash({"inputs": data["inputs"], "environments": data["environments"]})


def save_plan_manifest(manifest: PlanManifest, path: Path) -> None:
    """Persiste o manifest em JSON determinístico, criando diretórios intermediários."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(manifest.to_dict(), ensure_ascii=False, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def load_plan_manifest(path: Path) -> PlanManifest:
    """Restaura um manifest salvo por `save_plan_manifest`."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return PlanManifest.from_dict(data)
