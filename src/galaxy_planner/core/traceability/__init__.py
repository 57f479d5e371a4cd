# src/galaxy_planner/core/traceability/__init__.py
"""
Rastreabilidade do Galaxy Planner: manifest de plano.

API pública:
    - PlanManifest         → estrutura serializável do plano
    - create_plan_manifest → criação explícita a partir de um `Galaxy` planejado
    - compute_plan_hash    → identidade do conteúdo planejado
    - save_plan_manifest   → persistência em JSON
    - load_plan_manifest   → restauração determinística
"""

from .plan_manifest import (
    PlanManifest,
    compute_plan_hash,
    create_plan_manifest,
    load_plan_manifest,
    save_plan_manifest,
)

__all__ = [
    "PlanManifest",
    "compute_plan_hash",
    "create_plan_manifest",
    "load_plan_manifest",
    "save_plan_manifest",
]
