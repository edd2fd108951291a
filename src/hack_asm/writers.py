from __future__ import annotations
import os
from typing import Iterable, List
from .utils import to_bin16
from .encoding import Encoded

SOURCE_EXT = ".asm"
OUTPUT_EXT = ".hack"

def output_path_for(source: str) -> str:
    """'prog.asm' -> 'prog.hack' (mismo directorio y nombre base)."""
    base, _ = os.path.splitext(source)
    return base + OUTPUT_EXT

def to_bin_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_bin16(w.word) for w in words]

def write_bin(words: Iterable[Encoded], path: str) -> None:
    lines = to_bin_lines(words)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
