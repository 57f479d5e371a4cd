# src/galaxy_planner/core/engine/planner.py
"""
Plan: transformação de um Context base para um ambiente.

Este módulo converte o contexto base (arquivos descobertos por
namespace) no contexto específico de um ambiente, aplicando as regras de
escopo e transformação declaradas no `.galaxy.yaml`, e registra o mapa
`namespace transformado -> namespace original`.

Algoritmo, para cada namespace do contexto base (em ordem):
    1. fora do filtro de namespaces requisitado → ignorado
    2. listado em `skipOnNamespaces` → ignorado por completo
    3. nome transformado = namespace + sufixo (override por namespace, se houver);
       colisão com outro namespace de origem → `ConflictError`
    4. `fileSuffixes` vazio → todos os arquivos; senão, apenas arquivos cujo
       nome termina em algum sufixo (o primeiro sufixo listado que casar é
       o removido da identidade do release)
    5. identidade do release = releasePrefix + nome sem sufixo
    6. registro transformado anexado sob o namespace transformado

Decisões arquiteturais:
    - O plano é uma função pura; nenhum estado é mantido entre chamadas
    - A ordem de saída é a ordem de entrada (namespaces e arquivos)
    - Um ambiente sem namespaces aplicáveis gera contexto vazio, não erro

Limites explícitos:
    - Não lê diretórios (recebe o contexto base pronto)
    - Não executa appliers
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from galaxy_planner.core.config.spec import Environment
from galaxy_planner.core.context.context import Context, ReleaseFile
from galaxy_planner.core.exceptions import ConflictError


def match_file_suffix(name: str, suffixes: Sequence[str]) -> Optional[str]:
    """
    Primeiro sufixo de `suffixes` (na ordem listada) que termina `name`.

    Um sufixo só casa se sobrar identidade antes dele: `-prod` não seleciona
    o arquivo `-prod.yaml`, que geraria um release sem nome.
    """
    for suffix in suffixes:
        if suffix and name.endswith(suffix) and len(name) > len(suffix):
            return suffix
    return None


@dataclass
class Plan:
    """
    Plano de um ambiente sobre um contexto base.

    Após `context_for_environment()`, `original_ns` contém o mapa
    `namespace transformado -> namespace original` do ambiente.
    """

    environment: Environment
    namespace_filter: Sequence[str]
    base: Context
    original_ns: Dict[str, str] = field(default_factory=dict, init=False)

    def _in_scope(self, namespace: str) -> bool:
        return not self.namespace_filter or namespace in self.namespace_filter

    def _select(self, releases: Sequence[ReleaseFile]) -> List[Tuple[ReleaseFile, str]]:
        suffixes = self.environment.file_suffixes
        if not suffixes:
            return [(r, r.name) for r in releases]

        selected: List[Tuple[ReleaseFile, str]] = []
        for release in releases:
            suffix = match_file_suffix(release.name, suffixes)
            if suffix is None:
                continue
            selected.append((release, release.name[: -len(suffix)]))
        return selected

    def context_for_environment(self) -> Context:
        """
        Produz o contexto modificado do ambiente.

        Returns:
            Context: Novo contexto, indexado por namespace transformado.

        Raises:
            ConflictError: Se dois namespaces de origem produzirem o mesmo
                nome transformado.
        """
        env = self.environment
        transform = env.transform
        modified = Context()
        original_ns: Dict[str, str] = {}

        for namespace in self.base.namespaces():
            if not self._in_scope(namespace):
                continue
            if env.skips(namespace):
                continue

            target = namespace + transform.suffix_for(namespace)
            previous = original_ns.get(target)
            if previous is not None and previous != namespace:
                raise ConflictError(
                    message=(
                        f"Namespaces '{previous}' e '{namespace}' resultam no mesmo nome "
                        f"'{target}' no ambiente '{env.name}'"
                    ),
                    details={
                        "environment": env.name,
                        "target": target,
                        "sources": [previous, namespace],
                    },
                    hint="Ajuste 'transform.namespaceSuffix' ou 'transform.namespaceSuffixes'",
                )
            original_ns[target] = namespace

            modified.extend(
                target,
                (
                    ReleaseFile(
                        namespace=target,
                        path=release.path,
                        name=transform.release_prefix + identity,
                        original_namespace=namespace,
                    )
                    for release, identity in self._select(self.base.files_for(namespace))
                ),
            )

        self.original_ns = original_ns
        return modified


def plan_environment(
    environment: Environment,
    namespace_filter: Sequence[str],
    base: Context,
) -> Tuple[Context, Dict[str, str]]:
    """Atalho funcional: `(contexto modificado, mapa de namespaces originais)`."""
    plan = Plan(environment=environment, namespace_filter=namespace_filter, base=base)
    modified = plan.context_for_environment()
    return modified, plan.original_ns
