from __future__ import annotations
import argparse, sys, time
from typing import List, Optional, Tuple

from .ast import Node
from .parser import parse
from .linker import LinkResult, first_pass
from .encoding import EncodeResult, encode
from .symbols import SymbolTable
from .writers import SOURCE_EXT, output_path_for, write_bin
from .diagnostics import (
    AsmError,
    Diagnostic,
    SourceDecodeError,
    SourceNotFoundError,
    UsageError,
    error,
)

def assemble_text(
    text: str,
    *,
    filename: str | None = None,
    legacy: bool = False,
    symtab: Optional[SymbolTable] = None,
) -> Tuple[List[Node], List[Diagnostic], LinkResult, EncodeResult]:
    """Parsea, hace PASADA 1 y PASADA 2.
    Devuelve (nodes, diagnostics_totales, link_result, enc_result).
    DuplicateLabelError se propaga: no hay salida parcial."""
    nodes = parse(text)
    link = first_pass(nodes, symtab, filename=filename)
    enc = encode(nodes, link.symtab, legacy=legacy, filename=filename)
    diags = list(link.diagnostics) + list(enc.diagnostics)
    return nodes, diags, link, enc

def check_source_arg(path: str | None) -> str:
    if not path:
        raise UsageError(error("falta el archivo fuente", hint=f"indique un archivo {SOURCE_EXT}"))
    if not path.lower().endswith(SOURCE_EXT):
        raise UsageError(error(f"sólo se aceptan archivos con extensión {SOURCE_EXT}: {path}"))
    return path

def read_source(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as ex:
        raise SourceNotFoundError(error(f"no pude leer {path}: {ex.strerror or ex}", file=path)) from ex
    except UnicodeDecodeError as ex:
        raise SourceDecodeError(error(
            f"no pude decodificar {path} como UTF-8 (byte {ex.start})", file=path,
            hint="guarde el fuente en UTF-8 o ASCII",
        )) from ex

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(prog="hack-asm", description="Hack two-pass assembler")
    ap.add_argument("source", nargs="?", help="archivo .asm de entrada")
    ap.add_argument("-o", "--output", help="archivo .hack de salida (por defecto, junto al fuente)")
    ap.add_argument("--legacy-tables", action="store_true",
                    help="usar las tablas del ensamblador antiguo (!A = -A, JGE = JGT)")
    ap.add_argument("-q", "--quiet", action="store_true", help="no imprimir el resumen final")
    args = ap.parse_args(argv)

    t0 = time.perf_counter()
    try:
        source = check_source_arg(args.source)
        text = read_source(source)
    except UsageError as ex:
        print(ex.diagnostic, file=sys.stderr)
        ap.print_usage(sys.stderr)
        return 2
    except (SourceNotFoundError, SourceDecodeError) as ex:
        print(ex.diagnostic, file=sys.stderr)
        return 2

    try:
        nodes, diags, link, enc = assemble_text(text, filename=source, legacy=args.legacy_tables)
    except AsmError as ex:
        print(ex.diagnostic, file=sys.stderr)
        return 1

    had_error = False
    for d in diags:
        # imprimimos todo; si hay error, devolvemos código 1
        print(d, file=sys.stderr)
        if d.severity == "error":
            had_error = True

    if had_error:
        return 1

    out = args.output or output_path_for(source)
    try:
        write_bin(enc.words, out)
    except OSError as ex:
        print(f"ERROR al escribir {out}: {ex}", file=sys.stderr)
        return 3

    if not args.quiet:
        dt = time.perf_counter() - t0
        print(f"OK: {len(enc.words)} instrucciones → {out} ({dt:.3f} s)")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
