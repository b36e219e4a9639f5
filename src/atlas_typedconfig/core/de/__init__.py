# src/atlas_typedconfig/core/de/__init__.py
"""
Engine de deserialização do Atlas TypedConfig.

Este pacote converte um documento de configuração ordenado e aninhado em
estruturas tipadas, sem construir uma árvore intermediária genérica.

Componentes principais:
    - protocol → costura pull-based (Deserializer, Visitor, accessors)
    - cursor   → pilha explícita de frames (máquina de estados)
    - access   → accessors de campos e de sequências
    - engine   → despacho dirigido por tipo sobre o cursor
    - derive   → driver dirigido por type hints de dataclasses
    - numbers  → estreitamento numérico com política explícita
    - errors   → taxonomia fechada de falhas

Invariantes:
    - Cada chamada de decode possui seu próprio cursor
    - A primeira falha aborta a chamada inteira

Limites explícitos:
    - Não realiza parsing de texto
    - Não suporta mapas, enums, tuplas, bytes ou unit
"""
