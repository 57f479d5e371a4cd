# src/galaxy_planner/core/config/__init__.py
"""
Camada de configuração do Galaxy Planner.

Responsabilidades do pacote:
    - Modelo de dados da spec global (namespaces, ambientes, transform)
    - Carregamento do `.galaxy.yaml` com override local opcional
    - Deep-merge determinístico e hashing canônico
    - Configuração de runtime (`RunConfig`) da execução

Invariantes:
    - A mesma entrada sempre produz a mesma spec
    - Conflitos estruturais e nomes duplicados são tratados como erro

Limites explícitos:
    - Não inspeciona diretórios de namespace
    - Não executa planejamento
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DotGalaxyNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSpecError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_spec_hash
from .loader import load_dot_galaxy
from .merge import deep_merge
from .run_config import RunConfig, split_comma_list
from .spec import DotGalaxy, Environment, GalaxySpec, Namespaces, Transform

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DotGalaxy",
    "DotGalaxyNotFoundError",
    "Environment",
    "GalaxySpec",
    "InvalidConfigRootTypeError",
    "InvalidSpecError",
    "Namespaces",
    "RunConfig",
    "Transform",
    "UnsupportedConfigFormatError",
    "compute_spec_hash",
    "deep_merge",
    "load_dot_galaxy",
    "split_comma_list",
]
