# src/atlas_typedconfig/core/config/errors.py
"""
Exceções canônicas da camada de opções do Atlas TypedConfig.

Este módulo define a hierarquia de exceções utilizada durante o
carregamento e a validação estrutural das opções de decode
(`DecodeOptions`).

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de opções herdam de `OptionsError`
    - Nenhuma exceção aqui representa erro de deserialização do documento

Limites explícitos:
    - Não realiza fallback ou recovery
"""


class OptionsError(Exception):
    """
    Exceção base para erros relacionados às opções de decode.

    Esta hierarquia permite:
        - captura genérica de erros de opções
        - distinção clara entre falhas de opções e falhas de decode
    """


class OptionsNotFoundError(OptionsError):
    """
    Exceção levantada quando o arquivo de opções não é encontrado.

    Limites explícitos:
        - Não tenta inferir ou criar opções automaticamente
    """


class UnsupportedOptionsFormatError(OptionsError):
    """
    Exceção levantada quando o formato do arquivo de opções não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidOptionsError(OptionsError):
    """
    Exceção levantada quando as opções não são estruturalmente válidas.

    Exemplos:
        - raiz que não é um mapa
        - chave desconhecida
        - `number_policy` fora do domínio
        - `trace` não booleano
    """
