'''
tablas formales Hack (comp/dest/jump -> bits)
'''

from __future__ import annotations
from typing import Dict

# Prefijos de palabra
A_PREFIX = "0"
C_PREFIX = "111"

# dest: bit2=A, bit1=D, bit0=M
DEST: Dict[str, str] = {
    "":    "000",
    "M":   "001",
    "D":   "010",
    "MD":  "011",
    "A":   "100",
    "AM":  "101",
    "AD":  "110",
    "AMD": "111",
}

# comp: 'a' + c1..c6. a=1 selecciona M en lugar de A
COMP: Dict[str, str] = {
    "0":   "0101010",
    "1":   "0111111",
    "-1":  "0111010",
    "D":   "0001100",
    "A":   "0110000",
    "M":   "1110000",
    "!D":  "0001101",
    "!A":  "0110001",
    "!M":  "1110001",
    "-D":  "0001111",
    "-A":  "0110011",
    "-M":  "1110011",
    "D+1": "0011111",
    "A+1": "0110111",
    "M+1": "1110111",
    "D-1": "0001110",
    "A-1": "0110010",
    "M-1": "1110010",
    "D+A": "0000010",
    "D+M": "1000010",
    "D-A": "0010011",
    "D-M": "1010011",
    "A-D": "0000111",
    "M-D": "1000111",
    "D&A": "0000000",
    "D&M": "1000000",
    "D|A": "0010101",
    "D|M": "1010101",
}

# jump: bit2 salta si out<0, bit1 si out==0, bit0 si out>0
JUMP: Dict[str, str] = {
    "":    "000",
    "JGT": "001",
    "JEQ": "010",
    "JGE": "011",
    "JLT": "100",
    "JNE": "101",
    "JLE": "110",
    "JMP": "111",
}

# Tablas del ensamblador antiguo, para reproducir sus binarios bit a bit.
# Difieren de las canónicas en dos entradas: !A colisiona con -A y JGE con JGT.
LEGACY_COMP: Dict[str, str] = {**COMP, "!A": "0110011"}
LEGACY_JUMP: Dict[str, str] = {**JUMP, "JGE": "001"}

def _lookup(table: Dict[str, str], mnemonic: str, field: str) -> str:
    m = mnemonic.upper()
    if m not in table:
        raise KeyError(f"Mnemónico {field} desconocido: {mnemonic!r}")
    return table[m]

def dest_bits(mnemonic: str) -> str:
    """Devuelve los 3 bits de dest. '' -> '000'."""
    return _lookup(DEST, mnemonic, "dest")

def comp_bits(mnemonic: str, *, legacy: bool = False) -> str:
    """Devuelve los 7 bits de comp (a + c1..c6)."""
    return _lookup(LEGACY_COMP if legacy else COMP, mnemonic, "comp")

def jump_bits(mnemonic: str, *, legacy: bool = False) -> str:
    """Devuelve los 3 bits de jump. '' -> '000'."""
    return _lookup(LEGACY_JUMP if legacy else JUMP, mnemonic, "jump")
