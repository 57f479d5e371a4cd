# src/galaxy_planner/core/appliers.py
"""
Contrato dos appliers externos do Galaxy Planner.

Depois do planejamento, o orquestrador entrega o contexto modificado de
um ambiente a dois colaboradores externos:

    - secrets (Vault handler): provisiona segredos do namespace
    - releases (Landscaper): instala/atualiza os releases do namespace

Ambos satisfazem o mesmo protocolo de duas chamadas, executadas uma vez
por namespace e nesta ordem: `bootstrap(...)` e depois `apply()`.

Decisões arquiteturais:
    - Conformidade por duck typing (`@runtime_checkable`), sem herança
    - Appliers são construídos por fábricas injetadas no orquestrador
    - O core não interpreta as configurações opacas repassadas às fábricas

Limites explícitos:
    - Não implementa acesso a Vault, Helm ou Kubernetes
    - Não define retry nem rollback
"""

from __future__ import annotations

from typing import Callable, List, Protocol, runtime_checkable

from galaxy_planner.core.config.run_config import RunConfig
from galaxy_planner.core.config.spec import Environment
from galaxy_planner.core.context.context import Context


@runtime_checkable
class Applier(Protocol):
    """
    Capacidade mínima de um applier externo.

    Invariantes:
        - `bootstrap` é chamado antes de `apply` para cada namespace
        - Erros são levantados como exceções e propagados sem tratamento
    """

    def bootstrap(self, namespace: str, original_namespace: str, dry_run: bool) -> None:
        """Prepara o applier para `namespace` (nome transformado) a partir do diretório original."""
        ...

    def apply(self) -> None:
        """Aplica o que foi preparado no último `bootstrap`."""
        ...


# (run_config, ambiente, contextos modificados do ambiente) -> applier
ApplierFactory = Callable[[RunConfig, Environment, List[Context]], Applier]
