# src/atlas_typedconfig/core/__init__.py
"""
Core do Atlas TypedConfig.

Componentes principais:
    - document     → modelo do documento, agrupamento por escopo e loader
    - de           → engine de deserialização (cursor, protocolo, driver)
    - config       → opções de decode
    - traceability → trace estruturado das operações do cursor

Princípios fundamentais:
    - Nenhuma decisão silenciosa: todo comportamento é explícito e testado
    - Separação estrita entre documento, engine e opções
"""
