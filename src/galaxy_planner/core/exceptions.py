"""
Galaxy Planner: Exceções canônicas do core.

Este módulo define as exceções tipadas levantadas pelo subsistema de
planejamento. Cada tipo corresponde a uma classe de falha fatal:

- NotFoundError      → diretório obrigatório ausente (baseDir ou namespace)
- ConflictError      → dois namespaces de origem colidem no mesmo nome transformado
- ConfigurationError → escopo requisitado inválido ou nome desconhecido
- NotPlannedError    → apply solicitado para ambiente sem plano prévio

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Nenhuma exceção é engolida pelo core; a primeira falha interrompe a fase.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class GalaxyException(Exception):
    """Base class para exceções do Galaxy Planner.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    - `hint` indica onde o operador deve corrigir, quando aplicável
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": dict(self.details),
            "hint": self.hint,
        }


# ---------------------------------------------------------------------------
# Inspeção
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NotFoundError(GalaxyException):
    """Diretório obrigatório (baseDir ou diretório de namespace) não existe."""


# ---------------------------------------------------------------------------
# Planejamento
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConflictError(GalaxyException):
    """Dois namespaces de origem produzem o mesmo namespace transformado."""


@dataclass(frozen=True)
class ConfigurationError(GalaxyException):
    """Escopo requisitado inválido, ou ambiente/namespace desconhecido."""


# ---------------------------------------------------------------------------
# Apply
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class NotPlannedError(GalaxyException):
    """Ambiente requisitado não possui plano registrado nesta execução."""
