# src/atlas_typedconfig/core/traceability/__init__.py
"""
Rastreabilidade do Atlas TypedConfig.

Contém o `DecodeTrace`, log estruturado das operações do cursor
durante uma chamada de decode.
"""

from .trace import DecodeTrace

__all__ = ["DecodeTrace"]
