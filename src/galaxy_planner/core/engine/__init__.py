# src/galaxy_planner/core/engine/__init__.py
"""
Engine do Galaxy Planner.

Componentes principais:
    - planner → `Plan`: transformação pura de um Context base para um ambiente
    - galaxy  → `Galaxy`: orquestração das fases inspect / plan / apply

Princípios fundamentais:
    - Planejamento e aplicação são responsabilidades separadas
    - O mesmo Context base e o mesmo ambiente produzem sempre o mesmo plano
    - Nenhum erro de inspeção, planejamento ou applier é engolido

Limites explícitos:
    - Não implementa os appliers externos (secrets e releases)
    - Não persiste planos automaticamente (ver `core.traceability`)
"""

from .galaxy import Data, Galaxy, Phase, new_galaxy
from .planner import Plan, match_file_suffix, plan_environment

__all__ = [
    "Data",
    "Galaxy",
    "Phase",
    "Plan",
    "match_file_suffix",
    "new_galaxy",
    "plan_environment",
]
