'''
tabla de símbolos: predefinidos, etiquetas (pasada 1) y variables (pasada 2)
'''

from __future__ import annotations
from typing import Dict, Iterator, Optional

from .diagnostics import DuplicateLabelError, UnknownSymbolError, error

# Símbolos predefinidos de la arquitectura Hack
PREDEFINED: Dict[str, int] = {
    "SP": 0, "LCL": 1, "ARG": 2, "THIS": 3, "THAT": 4,
    **{f"R{n}": n for n in range(16)},
    "SCREEN": 16384, "KBD": 24576,
}

# Primera dirección de RAM libre para variables
VAR_BASE = 16

class SymbolTable:
    """Mapa nombre -> dirección, sensible a mayúsculas.

    Se crea con los predefinidos, la pasada 1 añade etiquetas y la pasada 2
    variables. No hay estado global: cada ensamblado usa su propia tabla.
    """

    def __init__(self, *, var_base: int = VAR_BASE):
        self._table: Dict[str, int] = dict(PREDEFINED)
        self._labels: Dict[str, int] = {}
        self._variables: Dict[str, int] = {}
        self._next_var = var_base

    # ---- consultas ----

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def get(self, name: str, default: Optional[int] = None) -> Optional[int]:
        return self._table.get(name, default)

    def resolve(self, name: str, *, line: int | None = None) -> int:
        """Devuelve la dirección de 'name' o lanza UnknownSymbolError."""
        try:
            return self._table[name]
        except KeyError:
            raise UnknownSymbolError(error(
                f"Símbolo no definido: {name}", line=line,
                hint="la pasada 2 debe reservar variables antes de resolverlas",
            )) from None

    @property
    def next_variable(self) -> int:
        """Dirección que recibirá la próxima variable nueva."""
        return self._next_var

    def labels(self) -> Dict[str, int]:
        return dict(self._labels)

    def variables(self) -> Dict[str, int]:
        return dict(self._variables)

    def as_dict(self) -> Dict[str, int]:
        return dict(self._table)

    # ---- mutaciones ----

    def bind_label(self, name: str, address: int, *, line: int | None = None,
                   file: str | None = None) -> None:
        """Registra una etiqueta. Repetirla con la misma dirección no hace nada;
        con otra dirección (o sobre un predefinido distinto) es fatal.

        Una etiqueta que coincide con un predefinido en la misma dirección,
        p.ej. '(R0)' en 0, también queda listada en labels()."""
        cur = self._table.get(name)
        if cur is None:
            self._table[name] = address
            self._labels[name] = address
            return
        if cur != address:
            what = "símbolo predefinido" if name in PREDEFINED else "etiqueta"
            raise DuplicateLabelError(error(
                f"Redefinición de {what}: {name} (ya vale {cur}, ahora {address})",
                line=line, file=file,
            ))
        if name not in self._variables:
            self._labels[name] = address

    def allocate_variable(self, name: str) -> int:
        """Devuelve la dirección de 'name'; si no existe, le asigna la siguiente libre."""
        cur = self._table.get(name)
        if cur is not None:
            return cur
        addr = self._next_var
        self._next_var += 1
        self._table[name] = addr
        self._variables[name] = addr
        return addr
