# src/atlas_typedconfig/core/config/__init__.py
"""
Camada de opções do Atlas TypedConfig.

Este pacote contém as estruturas e utilitários responsáveis por carregar
e validar estruturalmente as opções de decode (`DecodeOptions`).

Responsabilidades do pacote:
    - Carregamento de arquivos de opções (YAML ou JSON)
    - Validação estrutural explícita
    - Defaults determinísticos quando nada é informado

Limites explícitos:
    - Não executa decode
    - Não interage com o documento de configuração
"""
