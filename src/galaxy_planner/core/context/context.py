# src/galaxy_planner/core/context/context.py
"""
Context: representação em memória dos releases descobertos por namespace.

Um `Context` mapeia o nome de um namespace para a lista ordenada de
arquivos de release (`ReleaseFile`) encontrados no seu diretório. O mesmo
tipo representa tanto o contexto base (saída da inspeção) quanto o
contexto modificado (saída do plano de um ambiente).

Decisões arquiteturais:
    - A ordem dos namespaces é a ordem de inserção
    - A ordem dos arquivos dentro de um namespace é a ordem de descoberta
    - `ReleaseFile` é imutável; transformar um registro cria outro
    - Um namespace pode existir com lista vazia (diretório sem arquivos elegíveis)

Invariantes:
    - Contextos são construídos do zero a cada iteração de ambiente
    - Um contexto armazenado pelo orquestrador nunca é mutado depois
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence


@dataclass(frozen=True)
class ReleaseFile:
    """
    Registro de um arquivo de release.

    Campos:
        - namespace: namespace ao qual o registro pertence (transformado, após o plano)
        - path: caminho do arquivo de origem, preservado para leitura posterior
        - name: identidade lógica do release (nome do arquivo sem extensão,
          sem o sufixo de ambiente e com o prefixo de release, após o plano)
        - original_namespace: namespace de origem (diretório real do arquivo)
    """

    namespace: str
    path: str
    name: str
    original_namespace: str = ""

    def __post_init__(self) -> None:
        if not self.original_namespace:
            object.__setattr__(self, "original_namespace", self.namespace)

    @property
    def file_name(self) -> str:
        return Path(self.path).name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "namespace": self.namespace,
            "original_namespace": self.original_namespace,
            "path": self.path,
            "name": self.name,
        }


@dataclass
class Context:
    """Mapa ordenado `namespace -> [ReleaseFile]` de um passo de planejamento."""

    releases: Dict[str, List[ReleaseFile]] = field(default_factory=dict)

    def extend(self, namespace: str, releases: Iterable[ReleaseFile]) -> None:
        """Registra `releases` sob `namespace`, criando a entrada mesmo sem arquivos."""
        bucket = self.releases.setdefault(namespace, [])
        bucket.extend(releases)

    def add(self, release: ReleaseFile) -> None:
        self.extend(release.namespace, [release])

    def namespaces(self) -> List[str]:
        return list(self.releases)

    def files_for(self, namespace: str) -> List[ReleaseFile]:
        if namespace not in self.releases:
            raise KeyError(namespace)
        return list(self.releases[namespace])

    def is_empty(self) -> bool:
        return not self.releases

    def inspect_dir(self, namespace: str, base_dir: Path, extensions: Sequence[str]) -> None:
        """Inspeciona `base_dir` e anexa os arquivos encontrados sob `namespace`."""
        from .inspector import inspect_dir

        inspect_dir(self, namespace=namespace, base_dir=base_dir, extensions=extensions)

    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {ns: [r.to_dict() for r in files] for ns, files in self.releases.items()}
