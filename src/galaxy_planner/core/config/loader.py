# src/galaxy_planner/core/config/loader.py
"""
Loader do manifest `.galaxy.yaml`.

Este módulo é responsável por carregar o manifest principal e,
opcionalmente, um override local, resolvendo o documento efetivo via
deep-merge e convertendo-o no modelo de `spec.py`.

Responsabilidades do módulo:
    - Carregar arquivos em YAML (PyYAML) ou JSON
    - Validar requisitos estruturais mínimos (tipo raiz)
    - Aplicar o override local com precedência explícita
    - Delegar a validação do modelo para `DotGalaxy.from_dict`

Invariantes:
    - O manifest principal é obrigatório
    - O override local, quando ausente, é simplesmente ignorado
    - A mesma entrada sempre produz o mesmo `DotGalaxy`

Limites explícitos:
    - Não inspeciona diretórios de namespace
    - Não faz binding de CLI ou variáveis de ambiente
"""

from pathlib import Path
from typing import IO, Any, Callable, Dict, Optional, Union
import json

import yaml  # PyYAML

from .errors import (
    DotGalaxyNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge
from .spec import DotGalaxy


PathLike = Union[str, Path]


def _read_yaml(fh: IO[str]) -> Any:
    return yaml.safe_load(fh)


_READERS: Dict[str, Callable[[IO[str]], Any]] = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": json.load,
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de manifest e valida que a raiz é um mapa.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        DotGalaxyNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        InvalidConfigRootTypeError: Se a raiz do documento não for um mapa.
    """
    if not path.is_file():
        raise DotGalaxyNotFoundError(f"Manifest não encontrado: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise UnsupportedConfigFormatError(
            f"Formato de manifest não suportado: '{path.suffix}' ({path.name})"
        )

    with path.open("r", encoding="utf-8") as fh:
        document = reader(fh)

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise InvalidConfigRootTypeError(
            f"A raiz de {path.name} deve ser um mapa, recebido: {type(document).__name__}"
        )
    return document


def load_document(
    *,
    path: PathLike,
    local_path: Optional[PathLike] = None,
) -> Dict[str, Any]:
    """Documento efetivo (principal + override local), ainda sem validação de modelo."""
    effective = _load_file(Path(path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = deep_merge(effective, _load_file(local_file))

    return effective


def load_dot_galaxy(
    *,
    path: PathLike,
    local_path: Optional[PathLike] = None,
) -> DotGalaxy:
    """
    Carrega e resolve o manifest `.galaxy.yaml`.

    Args:
        path: Caminho do manifest principal.
        local_path: Caminho opcional do override local.

    Returns:
        DotGalaxy: Manifest validado.

    Raises:
        DotGalaxyNotFoundError: Se o manifest principal não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se o override mudar o tipo de alguma chave.
        InvalidSpecError: Se o conteúdo violar o modelo de dados.
    """
    return DotGalaxy.from_dict(load_document(path=path, local_path=local_path))
