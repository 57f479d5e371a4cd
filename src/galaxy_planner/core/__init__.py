# src/galaxy_planner/core/__init__.py
"""
Core do Galaxy Planner.

Este pacote reúne a implementação canônica do subsistema de planejamento:
descoberta de arquivos de release por namespace, transformação desse
conteúdo para cada ambiente e orquestração das fases inspect/plan/apply.

O core é projetado para ser:
    - determinístico (mesma árvore de diretórios → mesmo plano)
    - testável de forma isolada
    - livre de I/O de rede e de clientes de cluster
    - orientado a erros tipados e explícitos

Componentes principais:
    - config       → modelo do `.galaxy.yaml`, loader, merge e hashing
    - context      → FileInspector e Context em memória
    - engine       → Plan (transformação por ambiente) e Galaxy (orquestrador)
    - traceability → manifest de plano serializável
    - appliers     → contrato dos appliers externos (secrets e releases)
    - events       → log estruturado de eventos

Limites explícitos:
    - Não aplica secrets nem releases por conta própria
    - Não faz binding de CLI ou variáveis de ambiente
"""
