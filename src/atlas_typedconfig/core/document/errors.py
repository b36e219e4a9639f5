# src/atlas_typedconfig/core/document/errors.py
"""
Exceções canônicas do carregamento de documentos de configuração.

Este módulo define a hierarquia de exceções utilizada pelo loader de
documentos (`loader.py`), responsável por materializar árvores de
`ConfigItem` a partir de arquivos YAML ou JSON.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Nenhum documento parcial é retornado

Invariantes:
    - Todas as exceções de documento herdam de `DocumentError`
    - Nenhuma exceção aqui representa erro de deserialização
      (ver `core/de/errors.py`)
"""


class DocumentError(Exception):
    """
    Exceção base para erros de carregamento de documento.

    Permite captura genérica de falhas do loader sem confundi-las com
    falhas do engine de deserialização.
    """


class DocumentNotFoundError(DocumentError):
    """
    Exceção levantada quando o arquivo do documento não existe.

    Limites explícitos:
        - Não tenta localizar o arquivo em caminhos alternativos
    """


class UnsupportedDocumentFormatError(DocumentError):
    """
    Exceção levantada quando a extensão do arquivo não é suportada.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidDocumentRootTypeError(DocumentError):
    """
    Exceção levantada quando a raiz do documento não é uma lista de itens.

    Decisões arquiteturais:
        - O documento é sempre uma sequência ordenada de itens
        - Mapas na raiz são rejeitados, pois não preservam chaves repetidas
    """


class InvalidDocumentItemError(DocumentError):
    """
    Exceção levantada quando um item do documento é estruturalmente inválido.

    Exemplos:
        - item sem `key` ou com `key` não textual
        - valor que não é string, número ou booleano
        - campos desconhecidos no item
    """
