# tests/core/test_exceptions.py
"""
Testes da hierarquia de erros do Galaxy Planner.

Os testes asseguram que os erros de domínio carregam mensagem, detalhes
e dica de correção, e que são distinguíveis por tipo.
"""

import pytest

try:
    from galaxy_planner.core.exceptions import (
        ConfigurationError,
        ConflictError,
        GalaxyException,
        NotFoundError,
        NotPlannedError,
    )
except Exception as e:  # noqa: BLE001
    ConfigurationError = ConflictError = GalaxyException = NotFoundError = NotPlannedError = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """Falha explicitamente se `core.exceptions` não puder ser importado."""
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing src/galaxy_planner/core/exceptions.py (GalaxyException e subclasses).\n"
            f"Import error: {_IMPORT_ERR}"
        )


@pytest.mark.parametrize("cls", [NotFoundError, ConflictError, ConfigurationError, NotPlannedError])
def test_subclasses_share_the_base(cls):
    _require_imports()
    err = cls(message="boom", details={"k": "v"}, hint="fix it")

    assert isinstance(err, GalaxyException)
    assert str(err) == "boom"
    assert err.to_dict()["details"] == {"k": "v"}
    assert err.to_dict()["hint"] == "fix it"


def test_defaults():
    _require_imports()
    err = NotFoundError(message="missing")

    assert err.details == {}
    assert err.hint is None

    with pytest.raises(NotFoundError):
        raise err
