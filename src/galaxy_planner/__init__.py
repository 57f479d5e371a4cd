# src/galaxy_planner/__init__.py
"""
Galaxy Planner: planejamento GitOps de releases por ambiente.

Este pacote raiz define o namespace público do Galaxy Planner, responsável
por descobrir arquivos de release organizados por namespace e derivar, de
forma determinística, as variantes específicas de cada ambiente.

Princípios centrais:
    - Cada namespace corresponde a um diretório sob `namespaces.baseDir`
    - Cada ambiente aplica suas próprias regras de transformação
    - O planejamento é puro, reprodutível e auditável
    - A aplicação (secrets e releases) é delegada a appliers externos

Arquitetura em alto nível:
    - core.config       → carregamento, merge, validação e hashing do `.galaxy.yaml`
    - core.context      → inspeção de diretórios e contexto em memória
    - core.engine       → plano por ambiente e orquestrador (Galaxy)
    - core.traceability → manifest de plano para auditoria e diff

Limites explícitos:
    - Não realiza I/O de rede
    - Não conversa com cluster Kubernetes nem com Vault
    - Não decide *como* um release ou secret é aplicado
"""
# src/galaxy_planner/__init__.py
__version__ = "0.1.0"

from .core.config import DotGalaxy, RunConfig, load_dot_galaxy  # noqa: E402
from .core.engine import Galaxy, Phase, new_galaxy  # noqa: E402

__all__ = [
    "DotGalaxy",
    "Galaxy",
    "Phase",
    "RunConfig",
    "load_dot_galaxy",
    "new_galaxy",
    "__version__",
]
