'''
clase Diagnostic, helpers y excepciones fatales del ensamblador
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia", "nota"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
    "nota": "NOTA",
}

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Abarca errores, advertencias y notas, con ubicación opcional (archivo, línea y columna)
    y un mensaje de ayuda (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file)

def warning(message: str, *, line: int | None = None, col: int | None = None,
            file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo advertencia."""
    return Diagnostic("advertencia", message, line, col, hint, file)

def note(message: str, *, line: int | None = None, col: int | None = None,
         file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo nota."""
    return Diagnostic("nota", message, line, col, hint, file)

# ---- Errores fatales ----

class AsmError(Exception):
    """Error que aborta el ensamblado. Lleva el Diagnostic a imprimir."""

    def __init__(self, diagnostic: Diagnostic):
        super().__init__(str(diagnostic))
        self.diagnostic = diagnostic

class UsageError(AsmError):
    """Falta el argumento o no tiene extensión .asm."""

class SourceNotFoundError(AsmError):
    """No se pudo abrir el archivo fuente."""

class DuplicateLabelError(AsmError):
    """Una etiqueta se declaró en dos direcciones distintas."""

class UnknownSymbolError(AsmError):
    """Búsqueda de un símbolo nunca registrado (bug de secuencia en la pasada 2)."""

class SourceDecodeError(AsmError):
    """El archivo fuente no es UTF-8/ASCII válido."""
