# src/hack_asm/parser.py
from __future__ import annotations
from typing import List

from . import lexer
from .ast import (
    AddressInstruction,
    ComputeInstruction,
    LabelDeclaration,
    Ignorable,
    Node,
)

def classify(raw: str, lineno: int = 0) -> Node:
    """Convierte una línea cruda en su nodo. Nunca falla: lo no reconocido es Ignorable.

    Un '@' sin operando o una etiqueta sin nombre también degradan a Ignorable,
    porque ningún símbolo puede tener nombre vacío.
    """
    kind = lexer.command_kind(raw)

    if kind == "address":
        op = lexer.operand(raw)
        if op:
            return AddressInstruction(operand=op, line=lineno, text=raw)

    elif kind == "compute":
        return ComputeInstruction(
            dest=lexer.dest(raw),
            comp=lexer.comp(raw),
            jump=lexer.jump(raw),
            line=lineno,
            text=raw,
        )

    elif kind == "label":
        name = lexer.label_name(raw)
        if name:
            return LabelDeclaration(name=name, line=lineno, text=raw)

    return Ignorable(line=lineno, text=raw)

def parse(text: str, *, keep_ignorable: bool = False) -> List[Node]:
    """
    Devuelve la lista ordenada de nodos del programa, una entrada por línea:
      - AddressInstruction(operand, line)
      - ComputeInstruction(dest, comp, jump, line)
      - LabelDeclaration(name, line)
      - Ignorable(line)   (sólo si keep_ignorable=True)

    El fuente se carga una vez y ambas pasadas recorren esta misma lista.
    """
    nodes: List[Node] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        node = classify(raw, lineno)
        if isinstance(node, Ignorable) and not keep_ignorable:
            continue
        nodes.append(node)
    return nodes
