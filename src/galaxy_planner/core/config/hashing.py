# src/galaxy_planner/core/config/hashing.py
"""
Hashing canônico do Galaxy Planner.

Gera a identidade estrutural de um mapa serializável (spec global ou
plano), usada pelo manifest de plano para auditoria e comparação entre
execuções.

Política:
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256 em hexadecimal (64 caracteres)
"""

import hashlib
import json
from typing import Any, Dict


def canonical_json(data: Dict[str, Any]) -> str:
    return json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )


def compute_spec_hash(data: Dict[str, Any]) -> str:
    """
    Calcula o SHA-256 da serialização canônica de `data`.

    Mapas estruturalmente equivalentes produzem o mesmo hash,
    independentemente da ordem original das chaves. A ordem de listas
    é significativa: `names` e `fileSuffixes` são sequências ordenadas.

    Raises:
        TypeError: Se `data` não for um dicionário.
    """
    if not isinstance(data, dict):
        raise TypeError(
            f"Objeto para hashing deve ser dict, recebido: {type(data).__name__}"
        )
    return hashlib.sha256(canonical_json(data).encode("utf-8")).hexdigest()
