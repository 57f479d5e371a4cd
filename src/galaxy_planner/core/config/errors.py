# src/galaxy_planner/core/config/errors.py
"""
Exceções da camada de configuração do Galaxy Planner.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento, merge e validação estrutural do manifest `.galaxy.yaml`.

As exceções aqui definidas representam **arquivos de configuração
inválidos**, e não falhas de planejamento ou de apply (essas vivem em
`galaxy_planner.core.exceptions`).

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de inspeção de diretório

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de Engine, Context ou appliers
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados ao manifest `.galaxy.yaml`.

    Permite captura genérica de qualquer falha de configuração, separando-a
    das falhas de inspeção, planejamento e apply.
    """


class DotGalaxyNotFoundError(ConfigError):
    """
    Exceção levantada quando o manifest `.galaxy.yaml` não é encontrado.

    Decisões arquiteturais:
        - O manifest principal é obrigatório
        - O override local é opcional e sua ausência não é erro
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando a extensão do manifest não é suportada.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz do manifest não é um mapa chave-valor."""


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando o override local muda o tipo de uma chave.

    Exemplo de conflito:
        - base:     {"galaxy": {"namespaces": {"names": ["app"]}}}
        - override: {"galaxy": {"namespaces": "app"}}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
        - A mensagem identifica o caminho pontuado da chave em conflito
    """


class InvalidSpecError(ConfigError):
    """
    Exceção levantada quando o conteúdo de `galaxy` viola o modelo de dados.

    Exemplos:
        - `namespaces.baseDir` ausente
        - `namespaces.names` vazio ou com nomes repetidos
        - ambiente sem nome, ou dois ambientes com o mesmo nome

    Decisões arquiteturais:
        - Nomes duplicados de ambiente são rejeitados; não existe
          política de "último vence"
    """
