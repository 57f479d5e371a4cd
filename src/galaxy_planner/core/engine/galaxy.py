# src/galaxy_planner/core/engine/galaxy.py
"""
Galaxy: orquestrador das fases inspect / plan / apply.

O `Galaxy` é o único dono do estado de uma execução:

    - original         → contextos base por ambiente (fase inspect)
    - modified         → contextos modificados por ambiente (fase plan)
    - env_original_ns  → mapa `namespace transformado -> original` por ambiente

Fases:
    UNINSPECTED → INSPECTED (opcional) → PLANNED → APPLIED

Decisões arquiteturais:
    - Execução estritamente sequencial: ambientes no laço externo,
      namespaces no laço interno
    - Cada ambiente recebe um Context base construído do zero
    - A primeira falha interrompe a fase; resultados de iterações
      anteriores permanecem em memória
    - Apply exige exatamente um ambiente requisitado e planejado
    - Secrets são aplicados antes dos releases de cada namespace;
      não existe rollback de namespaces já aplicados
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from galaxy_planner.core.appliers import Applier, ApplierFactory
from galaxy_planner.core.config.run_config import RunConfig
from galaxy_planner.core.config.spec import DotGalaxy, Environment
from galaxy_planner.core.context.context import Context
from galaxy_planner.core.events import EventLog, configure_logging
from galaxy_planner.core.exceptions import (
    ConfigurationError,
    NotFoundError,
    NotPlannedError,
)

from .planner import Plan


# nome do ambiente -> contextos
Data = Dict[str, List[Context]]

# chamado pelo `loop` com o contexto base de cada ambiente
ActOnContext = Callable[[EventLog, str, Context], None]


class Phase(str, Enum):
    """Fase corrente do orquestrador."""

    UNINSPECTED = "uninspected"
    INSPECTED = "inspected"
    PLANNED = "planned"
    APPLIED = "applied"


class Galaxy:
    """Orquestrador de uma execução do Galaxy Planner."""

    def __init__(
        self,
        *,
        dot_galaxy: DotGalaxy,
        cfg: RunConfig,
        secrets_factory: Optional[ApplierFactory] = None,
        releases_factory: Optional[ApplierFactory] = None,
        log: Optional[EventLog] = None,
    ):
        self.dot_galaxy = dot_galaxy
        self.cfg = cfg
        self.secrets_factory = secrets_factory
        self.releases_factory = releases_factory
        self.log = (log or EventLog()).bind(type="galaxy", dry_run=cfg.dry_run)

        self.phase: Phase = Phase.UNINSPECTED
        self.original: Data = {}
        self.modified: Data = {}
        self.env_original_ns: Dict[str, Dict[str, str]] = {}

    @property
    def events(self) -> List[dict]:
        return self.log.events

    # ------------------------------------------------------------------
    # Inspect
    # ------------------------------------------------------------------

    def _require_base_dir(self) -> None:
        base_dir = Path(self.dot_galaxy.spec.namespaces.base_dir)
        if not base_dir.is_dir():
            raise NotFoundError(
                message=f"Diretório base não encontrado: {base_dir}",
                details={"path": str(base_dir)},
                hint="Ajuste 'namespaces.baseDir' no .galaxy.yaml",
            )

    def inspect(self) -> None:
        """Inspeciona todos os namespaces para todos os ambientes, populando `original`."""
        self._require_base_dir()
        self.original = {}

        def collect(log: EventLog, env: str, ctx: Context) -> None:
            self.original.setdefault(env, []).append(ctx)

        self.loop(collect)
        if self.phase is Phase.UNINSPECTED:
            self.phase = Phase.INSPECTED

    # ------------------------------------------------------------------
    # Plan
    # ------------------------------------------------------------------

    def _validate_scope(self) -> None:
        declared_envs = self.dot_galaxy.list_environments()
        unknown_envs = [e for e in self.cfg.get_environments() if e not in declared_envs]
        if unknown_envs:
            raise ConfigurationError(
                message=f"Ambientes requisitados não declarados: {', '.join(unknown_envs)}",
                details={"unknown": unknown_envs, "declared": declared_envs},
            )

        declared_ns = self.dot_galaxy.list_namespaces()
        unknown_ns = [n for n in self.cfg.get_namespaces() if n not in declared_ns]
        if unknown_ns:
            raise ConfigurationError(
                message=f"Namespaces requisitados não declarados: {', '.join(unknown_ns)}",
                details={"unknown": unknown_ns, "declared": declared_ns},
            )

    def plan(self) -> None:
        """Planeja os ambientes requisitados (todos, se nenhum), populando `modified`."""
        self._validate_scope()
        requested = self.cfg.get_environments()
        namespaces = self.cfg.get_namespaces()

        self.log.info(
            f"Planning for namespaces '{namespaces}' on environments '{requested}'"
        )
        self.modified = {}
        self.env_original_ns = {}

        def plan_env(log: EventLog, env_name: str, ctx: Context) -> None:
            env = self.dot_galaxy.get_environment(env_name)

            log.info("Planning...")
            plan = Plan(environment=env, namespace_filter=namespaces, base=ctx)
            modified = plan.context_for_environment()

            self.env_original_ns[env_name] = plan.original_ns
            self.modified[env_name] = [modified]

        self.loop(plan_env, environments=requested)
        self.phase = Phase.PLANNED

    # ------------------------------------------------------------------
    # Apply
    # ------------------------------------------------------------------

    def _build_applier(
        self,
        factory: Optional[ApplierFactory],
        role: str,
        env: Environment,
        contexts: List[Context],
    ) -> Applier:
        if factory is None:
            raise ConfigurationError(
                message=f"Nenhum applier de {role} configurado",
                details={"role": role, "environment": env.name},
                hint="Informe a fábrica do applier em new_galaxy(...)",
            )
        return factory(self.cfg, env, contexts)

    def apply(self) -> None:
        """Aplica secrets e releases do único ambiente requisitado, namespace a namespace."""
        self.log.info(
            f"DRY-RUN: '{self.cfg.dry_run}', Environment: '{self.cfg.get_environments()}'"
        )
        env_name = self.probe_single_env()

        log = self.log.bind(env=env_name)
        log.info("Applying changes for environment...")

        env = self.dot_galaxy.get_environment(env_name)
        contexts = self.modified[env_name]

        secrets: Optional[Applier] = None
        if not self.cfg.skip_secrets:
            secrets = self._build_applier(self.secrets_factory, "secrets", env, contexts)
        releases = self._build_applier(self.releases_factory, "releases", env, contexts)

        for ns, original_ns in self.env_original_ns[env_name].items():
            if secrets is not None:
                log.info(f"Handling secrets for '{ns}' namespace", namespace=ns)
                secrets.bootstrap(ns, original_ns, self.cfg.dry_run)
                secrets.apply()

            log.info(
                f"Handling namespace '{ns}', original name '{original_ns}'",
                namespace=ns,
            )
            releases.bootstrap(ns, original_ns, self.cfg.dry_run)
            releases.apply()

        self.phase = Phase.APPLIED

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def base_context(self, log: EventLog) -> Context:
        """Context base novo, inspecionando o diretório de cada namespace declarado."""
        exts = self.dot_galaxy.spec.namespaces.extensions
        ctx = Context()
        for ns in self.dot_galaxy.list_namespaces():
            base_dir = self.dot_galaxy.get_namespace_dir(ns)
            log.info(f"Inspecting namespace '{ns}', directory '{base_dir}'", exts=list(exts))
            try:
                ctx.inspect_dir(ns, base_dir, exts)
            except NotFoundError as exc:
                log.error(f"error during inspecting context: {exc}", namespace=ns)
                raise
        return ctx

    def loop(self, fn: ActOnContext, environments: Sequence[str] = ()) -> None:
        """
        Percorre os ambientes declarados, entregando a `fn` um Context base novo.

        Quando `environments` não é vazio, ambientes fora da lista são
        ignorados antes de qualquer inspeção.
        """
        for env in self.dot_galaxy.list_environments():
            log = self.log.bind(env=env)
            if environments and env not in environments:
                log.info(f"Skipping environment '{env}'!")
                continue
            fn(log, env, self.base_context(log))

    def probe_single_env(self) -> str:
        """
        Garante um único ambiente requisitado, presente no plano e no mapa de namespaces.

        Raises:
            ConfigurationError: Se o número de ambientes requisitados for diferente de 1.
            NotPlannedError: Se o ambiente não possuir plano registrado.
        """
        requested = self.cfg.get_environments()
        if len(requested) != 1:
            raise ConfigurationError(
                message="Exatamente um ambiente deve ser informado para apply",
                details={"requested": requested},
            )

        env_name = requested[0]

        self.log.info("Checking if environment is listed at planned data...")
        if env_name not in self.modified:
            raise NotPlannedError(
                message=f"Ambiente '{env_name}' não consta nos dados planejados",
                details={"environment": env_name, "planned": list(self.modified)},
                hint="Execute plan() para este ambiente antes de apply()",
            )
        self.log.debug("Retrieving original namespace name...")
        if env_name not in self.env_original_ns:
            raise NotPlannedError(
                message=f"Ambiente '{env_name}' não consta no mapa de namespaces originais",
                details={"environment": env_name},
            )

        return env_name


def new_galaxy(
    dot_galaxy: DotGalaxy,
    cfg: RunConfig,
    *,
    secrets_factory: Optional[ApplierFactory] = None,
    releases_factory: Optional[ApplierFactory] = None,
    log: Optional[EventLog] = None,
) -> Galaxy:
    """Instancia um orquestrador para a spec global e a configuração de runtime.

    O nível de log de `cfg.log_level` é aplicado ao logger `galaxy_planner`.
    """
    configure_logging(cfg.log_level)
    return Galaxy(
        dot_galaxy=dot_galaxy,
        cfg=cfg,
        secrets_factory=secrets_factory,
        releases_factory=releases_factory,
        log=log,
    )
