# src/hack_asm/encoding.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from .ast import AddressInstruction, ComputeInstruction, Node
from .isa import A_PREFIX, C_PREFIX, dest_bits, comp_bits, jump_bits
from .symbols import SymbolTable
from .utils import ADDRESS_BITS, decimal_low_bits, is_decimal, to_bin
from .diagnostics import Diagnostic, error, warning

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    word: int     # u16
    pc: int       # dirección de esta instrucción
    line: int
    bits: str     # los 16 caracteres '0'/'1' tal como se escriben

@dataclass(frozen=True)
class EncodeResult:
    words: List[Encoded]
    diagnostics: List[Diagnostic]

# ---------------- Campos ----------------

def encode_dest(mnemonic: str) -> str:
    return dest_bits(mnemonic)

def encode_comp(mnemonic: str, *, legacy: bool = False) -> str:
    return comp_bits(mnemonic, legacy=legacy)

def encode_jump(mnemonic: str, *, legacy: bool = False) -> str:
    return jump_bits(mnemonic, legacy=legacy)

def encode_address(value: int) -> str:
    """'0' + dirección en 15 bits. Los valores >= 2^15 pierden los bits altos."""
    return A_PREFIX + to_bin(value, ADDRESS_BITS)

def encode_compute(dest: str, comp: str, jump: str, *, legacy: bool = False) -> str:
    """'111' + comp(7) + dest(3) + jump(3). KeyError si algún mnemónico no existe."""
    return C_PREFIX + encode_comp(comp, legacy=legacy) + encode_dest(dest) + encode_jump(jump, legacy=legacy)

# ---------------- Pasada 2 ----------------

def encode(
    nodes: Sequence[Node],
    symtab: SymbolTable,
    *,
    legacy: bool = False,
    filename: str | None = None,
) -> EncodeResult:
    """Recorre los nodos en orden de fuente y emite una palabra por instrucción real.

    Los operandos simbólicos sin dirección se reservan como variables
    (a partir de 16) la primera vez que aparecen.
    """
    diags: List[Diagnostic] = []
    words: List[Encoded] = []
    pc = 0

    for n in nodes:
        if isinstance(n, AddressInstruction):
            if is_decimal(n.operand):
                value, overflow = decimal_low_bits(n.operand, ADDRESS_BITS)
                if overflow:
                    shown = n.operand if len(n.operand) <= 20 else n.operand[:20] + "..."
                    diags.append(warning(
                        f"Dirección fuera de rango (15 bits): {shown}; se conservan los bits bajos",
                        line=n.line, file=filename,
                    ))
            else:
                value = symtab.allocate_variable(n.operand)
            bits = encode_address(value)

        elif isinstance(n, ComputeInstruction):
            try:
                bits = encode_compute(n.dest, n.comp, n.jump, legacy=legacy)
            except KeyError as ex:
                diags.append(error(f"Instrucción C no válida: {n.text.strip()}", line=n.line,
                                   file=filename, hint=ex.args[0]))
                pc += 1
                continue

        else:
            # etiquetas e ignorables no generan palabra
            continue

        words.append(Encoded(word=int(bits, 2), pc=pc, line=n.line, bits=bits))
        pc += 1

    return EncodeResult(words=words, diagnostics=diags)
