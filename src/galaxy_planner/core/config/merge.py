# src/galaxy_planner/core/config/merge.py
"""
Deep-merge do manifest `.galaxy.yaml` com o override local.

Política de merge:
    - mapa com mapa → merge recursivo por chave
    - lista ou escalar → o valor do override substitui o da base
    - valor ausente ou null na base → assume o valor do override
    - null no override → limpa o valor herdado
    - tipos diferentes → `ConfigTypeConflictError` com o caminho da chave

Invariantes:
    - Nenhum input é mutado
    - A ordem das chaves da base é preservada; chaves novas entram no final
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import ConfigTypeConflictError


KeyPath = Tuple[str, ...]


def _dotted(path: KeyPath) -> str:
    return ".".join(path) if path else "<root>"


def _merge_value(current: Any, incoming: Any, path: KeyPath) -> Any:
    if current is None or incoming is None:
        return deepcopy(incoming)
    if isinstance(current, dict) and isinstance(incoming, dict):
        return deep_merge(current, incoming, path)
    if type(current) is not type(incoming):
        raise ConfigTypeConflictError(
            f"Conflito de tipo na chave '{_dotted(path)}': "
            f"{type(current).__name__} (manifest) vs {type(incoming).__name__} (override)"
        )
    return deepcopy(incoming)


def deep_merge(
    base: Dict[str, Any],
    override: Dict[str, Any],
    _path: KeyPath = (),
) -> Dict[str, Any]:
    """
    Combina `base` e `override` em um novo dicionário.

    Raises:
        ConfigTypeConflictError: Se algum dos lados não for um mapa, ou se
            uma chave muda de tipo entre manifest e override.
    """
    for side in (base, override):
        if not isinstance(side, dict):
            raise ConfigTypeConflictError(
                f"Deep-merge em '{_dotted(_path)}' requer mapas, recebido: {type(side).__name__}"
            )

    merged = {key: deepcopy(value) for key, value in base.items()}
    for key, incoming in override.items():
        merged[key] = _merge_value(merged.get(key), incoming, _path + (str(key),))
    return merged
