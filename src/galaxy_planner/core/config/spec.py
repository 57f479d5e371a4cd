# src/galaxy_planner/core/config/spec.py
"""
Modelo de dados do manifest `.galaxy.yaml`.

Este módulo define a representação em memória da spec global do Galaxy
Planner: namespaces (diretórios de releases), ambientes e as regras de
transformação de cada ambiente.

Formato esperado (após o loader):

    galaxy:
      namespaces:
        baseDir: releases
        extensions: [.yaml]
        names: [app, internal]
      environments:
        - name: prod
          skipOnNamespaces: [internal]
          fileSuffixes: [-prod]
          transform:
            namespaceSuffix: -prod
            releasePrefix: x-
            namespaceSuffixes:
              app: -live

Decisões arquiteturais:
    - Todas as estruturas são imutáveis (frozen dataclasses)
    - Sequências preservam a ordem declarada no manifest
    - Nomes de ambiente e de namespace são únicos; duplicidade é erro
    - A busca de ambiente por nome é indexada, nunca "primeiro que casar"

Limites explícitos:
    - Não lê arquivos (responsabilidade do loader)
    - Não inspeciona o conteúdo dos diretórios de namespace
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from galaxy_planner.core.exceptions import ConfigurationError, NotFoundError

from .errors import InvalidSpecError


DEFAULT_EXTENSIONS: Tuple[str, ...] = (".yaml", ".yml")


# ---------------------------------------------------------------------------
# Helpers de parsing
# ---------------------------------------------------------------------------

def _mapping(value: Any, where: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidSpecError(f"'{where}' deve ser um mapa, recebido: {type(value).__name__}")
    return value


def _optional_str(value: Any, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidSpecError(f"'{where}' deve ser string, recebido: {type(value).__name__}")
    return value


def _required_str(value: Any, where: str) -> str:
    text = _optional_str(value, where)
    if not text.strip():
        raise InvalidSpecError(f"'{where}' é obrigatório e não pode ser vazio")
    return text


def _str_list(value: Any, where: str) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise InvalidSpecError(f"'{where}' deve ser uma lista, recebido: {type(value).__name__}")
    items: List[str] = []
    for idx, item in enumerate(value):
        items.append(_optional_str(item, f"{where}[{idx}]"))
    return items


def _unique(items: Iterable[str]) -> Tuple[str, ...]:
    # set semântico com ordem de declaração preservada
    seen: Dict[str, None] = {}
    for item in items:
        seen.setdefault(item, None)
    return tuple(seen)


def normalize_extension(ext: str) -> str:
    ext = ext.strip()
    if not ext:
        raise InvalidSpecError("extensão vazia em 'namespaces.extensions'")
    return ext if ext.startswith(".") else f".{ext}"


# ---------------------------------------------------------------------------
# Modelo
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Transform:
    """Regras de transformação de um ambiente (sufixo de namespace, prefixo de release)."""

    namespace_suffix: str = ""
    release_prefix: str = ""
    namespace_suffixes: Dict[str, str] = field(default_factory=dict)

    def suffix_for(self, namespace: str) -> str:
        """Sufixo efetivo de `namespace`: override por namespace, senão o sufixo do ambiente."""
        if namespace in self.namespace_suffixes:
            return self.namespace_suffixes[namespace]
        return self.namespace_suffix

    @classmethod
    def from_dict(cls, data: Any, where: str = "transform") -> "Transform":
        raw = _mapping(data, where)
        overrides = _mapping(raw.get("namespaceSuffixes"), f"{where}.namespaceSuffixes")
        return cls(
            namespace_suffix=_optional_str(raw.get("namespaceSuffix"), f"{where}.namespaceSuffix"),
            release_prefix=_optional_str(raw.get("releasePrefix"), f"{where}.releasePrefix"),
            namespace_suffixes={
                str(ns): _optional_str(sfx, f"{where}.namespaceSuffixes.{ns}")
                for ns, sfx in overrides.items()
            },
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "namespaceSuffix": self.namespace_suffix,
            "releasePrefix": self.release_prefix,
        }
        if self.namespace_suffixes:
            data["namespaceSuffixes"] = dict(self.namespace_suffixes)
        return data


@dataclass(frozen=True)
class Environment:
    """
    Ambiente de deploy com suas regras de escopo e transformação.

    Campos:
        - name: nome único do ambiente
        - skip_on_namespaces: namespaces omitidos por completo neste ambiente
        - file_suffixes: sufixos elegíveis (vazio → todos os arquivos)
        - transform: sufixo de namespace e prefixo de release
    """

    name: str
    skip_on_namespaces: Tuple[str, ...] = ()
    file_suffixes: Tuple[str, ...] = ()
    transform: Transform = field(default_factory=Transform)

    def skips(self, namespace: str) -> bool:
        return namespace in self.skip_on_namespaces

    @classmethod
    def from_dict(cls, data: Any, where: str = "environments[]") -> "Environment":
        raw = _mapping(data, where)
        return cls(
            name=_required_str(raw.get("name"), f"{where}.name"),
            skip_on_namespaces=_unique(_str_list(raw.get("skipOnNamespaces"), f"{where}.skipOnNamespaces")),
            file_suffixes=tuple(
                s for s in _str_list(raw.get("fileSuffixes"), f"{where}.fileSuffixes") if s
            ),
            transform=Transform.from_dict(raw.get("transform"), f"{where}.transform"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "skipOnNamespaces": list(self.skip_on_namespaces),
            "fileSuffixes": list(self.file_suffixes),
            "transform": self.transform.to_dict(),
        }


@dataclass(frozen=True)
class Namespaces:
    """Onde encontrar os diretórios de namespace e quais extensões considerar."""

    base_dir: str
    names: Tuple[str, ...] = ()
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS

    @classmethod
    def from_dict(cls, data: Any, where: str = "namespaces") -> "Namespaces":
        raw = _mapping(data, where)
        base_dir = _required_str(raw.get("baseDir"), f"{where}.baseDir")

        names = _str_list(raw.get("names"), f"{where}.names")
        if not names:
            raise InvalidSpecError(f"'{where}.names' deve conter ao menos um namespace")
        for idx, name in enumerate(names):
            _required_str(name, f"{where}.names[{idx}]")
        duplicated = sorted({n for n in names if names.count(n) > 1})
        if duplicated:
            raise InvalidSpecError(f"Namespaces duplicados em '{where}.names': {duplicated}")

        raw_exts = _str_list(raw.get("extensions"), f"{where}.extensions")
        extensions = _unique(normalize_extension(e) for e in raw_exts) if raw_exts else DEFAULT_EXTENSIONS

        return cls(base_dir=base_dir, names=tuple(names), extensions=extensions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "baseDir": self.base_dir,
            "extensions": list(self.extensions),
            "names": list(self.names),
        }


@dataclass(frozen=True)
class GalaxySpec:
    """
    Spec global: ambientes + namespaces.

    Invariantes:
        - Nomes de ambiente são únicos (validado na construção)
        - `skipOnNamespaces` e `transform.namespaceSuffixes` só referenciam
          namespaces declarados em `namespaces.names`
        - A ordem de `environments` e de `namespaces.names` é a ordem declarada
    """

    environments: Tuple[Environment, ...]
    namespaces: Namespaces
    _by_name: Dict[str, Environment] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        declared = set(self.namespaces.names)
        index: Dict[str, Environment] = {}
        for env in self.environments:
            if env.name in index:
                raise InvalidSpecError(f"Ambiente declarado mais de uma vez: '{env.name}'")
            index[env.name] = env

            for key, referenced in (
                ("skipOnNamespaces", env.skip_on_namespaces),
                ("transform.namespaceSuffixes", tuple(env.transform.namespace_suffixes)),
            ):
                unknown = [ns for ns in referenced if ns not in declared]
                if unknown:
                    raise InvalidSpecError(
                        f"Ambiente '{env.name}' referencia namespaces não declarados "
                        f"em '{key}': {unknown}"
                    )
        object.__setattr__(self, "_by_name", index)

    def environment(self, name: str) -> Optional[Environment]:
        """Ambiente declarado com nome `name`, ou `None`."""
        return self._by_name.get(name)

    @classmethod
    def from_dict(cls, data: Any) -> "GalaxySpec":
        raw = _mapping(data, "galaxy")
        envs = raw.get("environments")
        if envs is None:
            envs = []
        if not isinstance(envs, list):
            raise InvalidSpecError(
                f"'galaxy.environments' deve ser uma lista, recebido: {type(envs).__name__}"
            )
        return cls(
            environments=tuple(
                Environment.from_dict(e, f"environments[{i}]") for i, e in enumerate(envs)
            ),
            namespaces=Namespaces.from_dict(raw.get("namespaces")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "environments": [e.to_dict() for e in self.environments],
            "namespaces": self.namespaces.to_dict(),
        }


@dataclass(frozen=True)
class DotGalaxy:
    """Representação do manifest `.galaxy.yaml` (chave raiz `galaxy`)."""

    spec: GalaxySpec

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DotGalaxy":
        if "galaxy" not in data:
            raise InvalidSpecError("Manifest sem a chave raiz 'galaxy'")
        return cls(spec=GalaxySpec.from_dict(data["galaxy"]))

    def to_dict(self) -> Dict[str, Any]:
        return {"galaxy": self.spec.to_dict()}

    def list_namespaces(self) -> List[str]:
        return list(self.spec.namespaces.names)

    def list_environments(self) -> List[str]:
        return [env.name for env in self.spec.environments]

    def get_namespace_dir(self, name: str) -> Path:
        """
        Caminho do diretório de `name` sob `namespaces.baseDir`.

        Raises:
            ConfigurationError: Se `name` não é um namespace declarado.
            NotFoundError: Se `baseDir` não existe ou não é diretório.
        """
        if name not in self.spec.namespaces.names:
            raise ConfigurationError(
                message=f"Namespace não declarado: {name}",
                details={"namespace": name, "declared": self.list_namespaces()},
            )
        base_dir = Path(self.spec.namespaces.base_dir)
        if not base_dir.is_dir():
            raise NotFoundError(
                message=f"baseDir não é um diretório: {base_dir}",
                details={"path": str(base_dir)},
                hint="Ajuste 'namespaces.baseDir' no .galaxy.yaml",
            )
        return base_dir / name

    def get_environment(self, name: str) -> Environment:
        """
        Ambiente declarado com nome `name`.

        Raises:
            ConfigurationError: Se nenhum ambiente com esse nome foi declarado.
        """
        env = self.spec.environment(name)
        if env is None:
            raise ConfigurationError(
                message=f"Ambiente não declarado: {name}",
                details={"environment": name, "declared": self.list_environments()},
            )
        return env
