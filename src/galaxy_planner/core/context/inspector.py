# src/galaxy_planner/core/context/inspector.py
"""
FileInspector: descoberta de arquivos de release em um diretório de namespace.

A inspeção lista apenas o conteúdo imediato do diretório (sem descida
recursiva), filtra por extensão e registra cada arquivo elegível no
`Context` informado.

Decisões arquiteturais:
    - A ordem de descoberta é a ordem lexicográfica do nome do arquivo,
      independente da ordem devolvida pelo sistema de arquivos
    - Subdiretórios são ignorados; aninhamento é modelado por namespaces
    - A extensão é comparada pelo final do nome (suporta `.tpl.yaml`);
      havendo mais de uma, a mais longa é removida do nome do release
    - Nada é anexado ao Context se a listagem falhar no meio

Limites explícitos:
    - Não lê o conteúdo dos arquivos
    - Não aplica regras de ambiente (responsabilidade do planner)
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from galaxy_planner.core.exceptions import NotFoundError

from .context import Context, ReleaseFile


def _matching_extension(file_name: str, extensions: Sequence[str]) -> Optional[str]:
    # a mais longa vence (`.tpl.yaml` sobre `.yaml`)
    candidates = [
        ext for ext in extensions if file_name.endswith(ext) and len(file_name) > len(ext)
    ]
    return max(candidates, key=len, default=None)


def inspect_dir(
    ctx: Context,
    *,
    namespace: str,
    base_dir: Union[str, Path],
    extensions: Sequence[str],
) -> None:
    """
    Anexa ao `ctx` os arquivos de `base_dir` cuja extensão está em `extensions`.

    Args:
        ctx: Context de destino (único efeito colateral da função).
        namespace: Namespace sob o qual os arquivos são registrados.
        base_dir: Diretório do namespace.
        extensions: Extensões aceitas, com ponto (ex.: `.yaml`).

    Raises:
        NotFoundError: Se `base_dir` não existir ou não for um diretório.
    """
    directory = Path(base_dir)
    if not directory.is_dir():
        raise NotFoundError(
            message=f"Diretório de namespace não encontrado: {directory}",
            details={"namespace": namespace, "path": str(directory)},
            hint="Crie o diretório ou remova o namespace de 'namespaces.names'",
        )

    found: List[ReleaseFile] = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if not entry.is_file():
            continue
        ext = _matching_extension(entry.name, extensions)
        if ext is None:
            continue
        found.append(
            ReleaseFile(
                namespace=namespace,
                path=str(entry),
                name=entry.name[: -len(ext)],
            )
        )

    ctx.extend(namespace, found)
