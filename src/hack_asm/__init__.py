'''
Ensamblador de dos pasadas para la arquitectura Hack (.asm -> .hack)
'''

from .assembler import assemble_text, main
from .symbols import SymbolTable

__all__ = ["assemble_text", "main", "SymbolTable"]
__version__ = "0.1.0"
