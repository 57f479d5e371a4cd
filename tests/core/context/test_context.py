# tests/core/context/test_context.py
"""
Testes do Context e do ReleaseFile.

Os testes asseguram que:
- o ReleaseFile herda o namespace original quando não informado
- o Context preserva a ordem de inserção de namespaces e arquivos
- os acessores não expõem o estado interno
- a serialização é ordenada e JSON-safe

Decisões arquiteturais:
    - O Context é um contêiner em memória, sem I/O
    - Namespaces desconhecidos são KeyError explícito
"""

import pytest

try:
    from galaxy_planner.core.context import Context, ReleaseFile
except Exception as e:  # noqa: BLE001
    Context = None
    ReleaseFile = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha explicitamente se `core.context.context` não puder ser importado."""
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing src/galaxy_planner/core/context/context.py (Context, ReleaseFile).\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_release_file_defaults_original_namespace():
    """
    Verifica que um registro recém-descoberto aponta para o próprio namespace.

    Antes do planejamento, namespace e namespace original coincidem; o
    nome do arquivo é derivado do caminho.
    """
    _require_imports()
    release = ReleaseFile(namespace="app", path="/r/app/web.yaml", name="web")

    assert release.original_namespace == "app"
    assert release.file_name == "web.yaml"


def test_context_preserves_insertion_order():
    """
    Verifica a ordem de namespaces e arquivos.

    Namespaces aparecem na ordem da primeira inserção; arquivos, na ordem
    em que foram adicionados ao namespace.
    """
    _require_imports()
    ctx = Context()
    ctx.add(ReleaseFile(namespace="b", path="/r/b/1.yaml", name="1"))
    ctx.add(ReleaseFile(namespace="a", path="/r/a/2.yaml", name="2"))
    ctx.add(ReleaseFile(namespace="b", path="/r/b/3.yaml", name="3"))

    assert ctx.namespaces() == ["b", "a"]
    assert [r.name for r in ctx.files_for("b")] == ["1", "3"]


def test_files_for_returns_copy():
    """Mutar a lista devolvida por `files_for` não altera o Context."""
    _require_imports()
    ctx = Context()
    ctx.add(ReleaseFile(namespace="app", path="/r/app/web.yaml", name="web"))

    ctx.files_for("app").clear()

    assert len(ctx.files_for("app")) == 1


def test_files_for_unknown_namespace():
    _require_imports()
    with pytest.raises(KeyError):
        Context().files_for("missing")


def test_to_dict():
    """
    Verifica a visão serializável do Context.

    Cada registro expõe namespace transformado, namespace original,
    caminho de origem e identidade do release.
    """
    _require_imports()
    ctx = Context()
    ctx.add(ReleaseFile(namespace="app-prod", path="/r/app/web.yaml", name="x-web", original_namespace="app"))

    assert ctx.to_dict() == {
        "app-prod": [
            {
                "namespace": "app-prod",
                "original_namespace": "app",
                "path": "/r/app/web.yaml",
                "name": "x-web",
            }
        ]
    }
