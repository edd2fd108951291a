'''
dataclases de nodos (AddressInstruction, ComputeInstruction, LabelDeclaration, Ignorable)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

# ---- Nodos a nivel de fuente ----

@dataclass(frozen=True)
class AddressInstruction:
    """Instrucción A: '@valor'. operand es un literal decimal o un símbolo."""
    operand: str
    line: int
    text: str = ""

@dataclass(frozen=True)
class ComputeInstruction:
    """Instrucción C: 'dest=comp;jump'. dest y jump pueden ser '' (campo nulo)."""
    dest: str
    comp: str
    jump: str
    line: int
    text: str = ""

@dataclass(frozen=True)
class LabelDeclaration:
    """Pseudo-instrucción '(NOMBRE)': no ocupa dirección ni genera palabra."""
    name: str
    line: int
    text: str = ""

@dataclass(frozen=True)
class Ignorable:
    """Línea vacía, comentario o contenido no reconocido."""
    line: int
    text: str = ""

Instruction = Union[AddressInstruction, ComputeInstruction]
Node = Union[AddressInstruction, ComputeInstruction, LabelDeclaration, Ignorable]
