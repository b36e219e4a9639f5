# src/atlas_typedconfig/core/de/cursor.py
"""
Cursor de deserialização: pilha explícita de frames.

Este módulo implementa a máquina de estados central do engine. O cursor
mantém uma pilha de frames tipados que representa a posição atual da
travessia em profundidade sobre o documento:

    Struct --field(i)--> Item --as_sequence--> Seq --element(i)--> Struct ...

Tipos de frame:
    - StructFrame → escopo agrupado + índice do campo corrente
    - ItemFrame   → chave ligada + suas ocorrências
    - SeqFrame    → elementos de uma sequência + índice do elemento corrente

Regra push vs. replace:
    - Entrar no primeiro irmão (índice 0) empilha um frame novo
    - Avançar entre irmãos (índice > 0) substitui o topo no lugar
    - Cada push possui exatamente um pop, feito pelo accessor ao esgotar
      os irmãos (ou pelo engine, para structs aninhadas)

Invariantes:
    - A pilha nasce com um único StructFrame raiz
    - Ao final de um decode bem-sucedido a profundidade é exatamente 1
    - Resolução de campos é posicional, nunca por nome

Limites explícitos:
    - Não conhece tipos de destino
    - Não decide quando ascender; isso pertence aos accessors
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from ..document.model import ConfigValue, ScalarKind
from ..document.scope import Occurrence, Scope, group_scope
from ..traceability.trace import DecodeTrace
from .errors import (
    ExpectedKeyContextError,
    ExpectedObjectChildrenError,
    ExpectedSingleValueError,
    ExpectedStructContextError,
    NoFramesLeftError,
    WrongScalarKindError,
    unsupported_shape,
)


# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------

@dataclass
class StructFrame:
    """Escopo de uma struct e o índice do campo sendo decodificado."""

    scope: Scope
    index: int = 0

    label = "struct"


@dataclass
class ItemFrame:
    """Uma chave ligada e a lista de suas ocorrências no escopo."""

    key: str
    occurrences: Tuple[Occurrence, ...]
    _elements: Optional[Tuple[Occurrence, ...]] = field(default=None, repr=False)

    label = "item"

    def elements(self) -> Tuple[Occurrence, ...]:
        """Elementos da chave quando o tipo de destino é uma sequência."""
        if self._elements is None:
            self._elements = sequence_elements(self.key, self.occurrences)
        return self._elements

    def scalars(self) -> List[ConfigValue]:
        return [v for occ in self.occurrences for v in occ.values]


@dataclass
class SeqFrame:
    """Elementos de uma sequência e o índice do elemento corrente."""

    key: str
    elements: Tuple[Occurrence, ...]
    index: int = 0

    label = "seq"

    @property
    def element(self) -> Occurrence:
        return self.elements[self.index]


Frame = Union[StructFrame, ItemFrame, SeqFrame]


def sequence_elements(key: str, occurrences: Tuple[Occurrence, ...]) -> Tuple[Occurrence, ...]:
    """
    Reinterpreta as ocorrências de uma chave como elementos de sequência.

    Política (v1):
        - nenhuma ocorrência com filhos → um elemento por escalar,
          achatado na ordem do documento
        - todas as ocorrências com filhos → um elemento por ocorrência
        - formas misturadas → `UnsupportedShape`

    Raises:
        UnsupportedShapeError: Se ocorrências escalares e blocos se misturam.
    """
    with_children = [occ for occ in occurrences if occ.has_children]

    if not with_children:
        return tuple(
            Occurrence(values=(value,), children=())
            for occ in occurrences
            for value in occ.values
        )

    if len(with_children) == len(occurrences):
        return tuple(occurrences)

    err = unsupported_shape("sequence mixing scalar and block occurrences")
    err.details["key"] = key
    raise err


# ---------------------------------------------------------------------------
# Cursor
# ---------------------------------------------------------------------------

class Cursor:
    """
    Pilha de frames de uma única chamada de decode.

    O cursor é criado já com o StructFrame raiz. Todas as mutações
    passam por `descend_into_field`, `descend_into_sequence`,
    `enter_sequence_element_as_struct`, `enter_item_as_struct` e
    `ascend`; cada uma registra um evento no `trace`, quando presente.
    """

    def __init__(self, root: Scope, trace: Optional[DecodeTrace] = None) -> None:
        self._frames: List[Frame] = [StructFrame(root)]
        self.trace = trace

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self._frames)

    def current(self) -> Frame:
        if not self._frames:
            raise NoFramesLeftError("no more values left")
        return self._frames[-1]

    # -----------------------------
    # Mutações da pilha
    # -----------------------------
    def _parent(self, index: int) -> Frame:
        # índice 0: o pai é o topo; irmãos seguintes: o topo é o irmão anterior
        offset = 1 if index == 0 else 2
        if len(self._frames) < offset:
            raise NoFramesLeftError("no more values left")
        return self._frames[-offset]

    def _push(self, frame: Frame) -> None:
        self._frames.append(frame)
        self._log("push", frame)

    def _replace(self, frame: Frame) -> None:
        if not self._frames:
            raise NoFramesLeftError("no more values left")
        self._frames[-1] = frame
        self._log("replace", frame)

    def _push_or_replace(self, index: int, frame: Frame) -> None:
        if index == 0:
            self._push(frame)
        else:
            self._replace(frame)

    def descend_into_field(self, index: int) -> ItemFrame:
        """
        Liga o campo `index` do StructFrame pai.

        Pré-condição: o pai (topo para índice 0, penúltimo para os demais)
        é um StructFrame. Pós-condição: o topo é um ItemFrame com a chave
        e as ocorrências da entrada `index`.
        """
        parent = self._parent(index)
        if not isinstance(parent, StructFrame):
            raise ExpectedStructContextError(
                "expected struct context", frame=parent.label, index=index
            )

        entry = parent.scope[index]
        parent.index = index
        frame = ItemFrame(key=entry.key, occurrences=entry.occurrences)
        self._push_or_replace(index, frame)
        return frame

    def descend_into_sequence(self, index: int) -> SeqFrame:
        """
        Posiciona o elemento `index` da sequência do ItemFrame pai.

        Pré-condição: o pai (mesma regra de `descend_into_field`) é um
        ItemFrame. Pós-condição: o topo é um SeqFrame no índice `index`.
        """
        parent = self._parent(index)
        if not isinstance(parent, ItemFrame):
            raise ExpectedKeyContextError(
                "expected key context", frame=parent.label, index=index
            )

        frame = SeqFrame(key=parent.key, elements=parent.elements(), index=index)
        self._push_or_replace(index, frame)
        return frame

    def enter_sequence_element_as_struct(self, index: Optional[int] = None) -> StructFrame:
        """
        Empilha um StructFrame com os filhos do elemento corrente do SeqFrame.

        Raises:
            ExpectedStructContextError: Se o topo não for um SeqFrame.
            ExpectedObjectChildrenError: Se o elemento não tiver filhos.
        """
        top = self.current()
        if not isinstance(top, SeqFrame):
            raise ExpectedStructContextError("expected struct context", frame=top.label)

        position = top.index if index is None else index
        element = top.elements[position]
        if not element.has_children:
            raise ExpectedObjectChildrenError(
                "expected object children", key=top.key, index=position
            )

        frame = StructFrame(group_scope(element.children))
        self._push(frame)
        return frame

    def enter_item_as_struct(self) -> StructFrame:
        """
        Empilha um StructFrame com os filhos da única ocorrência do ItemFrame.

        Raises:
            ExpectedStructContextError: Se o topo não for um ItemFrame.
            ExpectedSingleValueError: Se a chave tiver mais de uma ocorrência.
            ExpectedObjectChildrenError: Se a ocorrência não tiver filhos.
        """
        top = self.current()
        if not isinstance(top, ItemFrame):
            raise ExpectedStructContextError("expected struct context", frame=top.label)

        if len(top.occurrences) != 1:
            raise ExpectedSingleValueError(
                "expected a single block", key=top.key, count=len(top.occurrences)
            )

        occurrence = top.occurrences[0]
        if not occurrence.has_children:
            raise ExpectedObjectChildrenError("expected object children", key=top.key)

        frame = StructFrame(group_scope(occurrence.children))
        self._push(frame)
        return frame

    def ascend(self) -> Frame:
        """Desempilha o topo. Deve ser chamado uma vez por push."""
        if not self._frames:
            raise NoFramesLeftError("no more values left")
        frame = self._frames.pop()
        self._log("pop", frame)
        return frame

    # -----------------------------
    # Leitura
    # -----------------------------
    def bound_key(self) -> str:
        top = self.current()
        if not isinstance(top, ItemFrame):
            raise ExpectedKeyContextError("expected key context", frame=top.label)
        return top.key

    def read_scalar(self, kind: ScalarKind) -> ConfigValue:
        """
        Extrai exatamente um escalar do tipo `kind` da posição corrente.

        Raises:
            ExpectedSingleValueError: Se a posição não tiver exatamente um escalar.
            WrongScalarKindError: Se a tag do escalar divergir de `kind`.
        """
        top = self.current()

        if isinstance(top, ItemFrame):
            values = top.scalars()
            key = top.key
        elif isinstance(top, SeqFrame):
            values = list(top.element.values)
            key = top.key
        else:
            raise ExpectedSingleValueError("expected a single value", frame=top.label)

        if len(values) != 1:
            raise ExpectedSingleValueError(
                "expected a single value", key=key, count=len(values)
            )

        value = values[0]
        if value.kind is not kind:
            raise WrongScalarKindError(
                f"expected {kind.value}, found {value.kind.value}",
                key=key,
                expected=kind.value,
                found=value.kind.value,
            )
        return value

    def _log(self, op: str, frame: Frame) -> None:
        if self.trace is None:
            return
        extra = {}
        if isinstance(frame, (ItemFrame, SeqFrame)):
            extra["key"] = frame.key
        if isinstance(frame, SeqFrame):
            extra["index"] = frame.index
        self.trace.log(op=op, frame=frame.label, depth=len(self._frames), **extra)
