# src/hack_asm/linker.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from .ast import AddressInstruction, ComputeInstruction, LabelDeclaration, Node
from .diagnostics import Diagnostic, note
from .symbols import SymbolTable

# ---------- Resultados de la pasada 1 ----------

@dataclass(frozen=True)
class LinkResult:
    symtab: SymbolTable
    instruction_count: int
    diagnostics: List[Diagnostic]

# ---------- Pasada 1 (etiquetas) ----------

def first_pass(
    nodes: Sequence[Node],
    symtab: Optional[SymbolTable] = None,
    *,
    filename: str | None = None,
) -> LinkResult:
    """Asigna a cada etiqueta la dirección de la siguiente instrucción real.

    Una etiqueta redefinida en otra dirección lanza DuplicateLabelError,
    antes de que exista ninguna salida.
    """
    if symtab is None:
        symtab = SymbolTable()
    diags: List[Diagnostic] = []

    pc = 0  # contador de instrucciones
    seen: Set[str] = set()

    for n in nodes:
        if isinstance(n, LabelDeclaration):
            # la etiqueta no ocupa dirección: apunta a la próxima instrucción
            if n.name in seen and symtab.get(n.name) == pc:
                diags.append(note(f"Etiqueta repetida en la misma dirección: {n.name}",
                                  line=n.line, file=filename))
            symtab.bind_label(n.name, pc, line=n.line, file=filename)
            seen.add(n.name)
            continue

        if isinstance(n, (AddressInstruction, ComputeInstruction)):
            pc += 1
            continue

        # Ignorable: sin efecto

    return LinkResult(symtab=symtab, instruction_count=pc, diagnostics=diags)
