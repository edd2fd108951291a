'''
bit-twiddling (anchos fijos, binario ASCII, literales decimales)
'''

from __future__ import annotations
import re
from typing import Tuple

# La palabra Hack es de 16 bits; el campo de dirección de una instrucción A, de 15
WORD_BITS = 16
ADDRESS_BITS = 15

DECIMAL_RE = re.compile(r"^[0-9]+$")

def is_decimal(token: str) -> bool:
    """Devuelve True si el token es un literal decimal sin signo (sólo dígitos ASCII)."""
    return bool(DECIMAL_RE.match(token))

def is_unsigned_nbit(x: int, n: int) -> bool:
    """Devuelve True si x está en [0, 2^n) (sin signo de n bits)."""
    if n <= 0:
        raise ValueError("n debe ser positivo")
    return 0 <= x < (1 << n)

def decimal_low_bits(token: str, bits: int) -> Tuple[int, bool]:
    """Convierte un literal decimal a sus 'bits' bits bajos sin pasar por int(token).

    Devuelve (valor, desbordó). Acepta literales de cualquier longitud.
    """
    modulus = 1 << bits
    value = 0
    overflow = False
    for ch in token:
        value = value * 10 + int(ch)
        if value >= modulus:
            overflow = True
            value %= modulus
    return value, overflow

def mask(x: int, bits: int) -> int:
    """Conserva sólo los 'bits' bits bajos de x."""
    return x & ((1 << bits) - 1)

def to_bin(x: int, width: int) -> str:
    """Representación binaria de 'width' bits, rellenada con ceros a la izquierda."""
    if width <= 0:
        raise ValueError("width debe ser positivo")
    return format(mask(x, width), f"0{width}b")

def to_bin16(x: int) -> str:
    """Representación binaria de una palabra Hack (16 bits)."""
    return to_bin(x, WORD_BITS)
