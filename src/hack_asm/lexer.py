from __future__ import annotations
import re
from typing import Literal

COMMENT_MARKER = "//"

WHITESPACE_RE = re.compile(r"\s+")

Kind = Literal["address", "compute", "label", "ignorable"]

def squeeze(line: str) -> str:
    """Remove every whitespace character, not only the leading/trailing ones."""
    return WHITESPACE_RE.sub("", line)

def command_kind(line: str) -> Kind:
    """Classify a raw line by the characters it contains.

    '@' wins over ';'/'=' which win over '(...)'. A line holding '//' anywhere
    is ignorable, even when it also looks like an instruction (no trailing
    comments on instruction lines).
    """
    if COMMENT_MARKER in line:
        return "ignorable"
    if "@" in line:
        return "address"
    if ";" in line or "=" in line:
        return "compute"
    if "(" in line and ")" in line:
        return "label"
    return "ignorable"

def operand(line: str) -> str:
    """Text after the first '@' ('' if there is none)."""
    s = squeeze(line)
    _, at, rest = s.partition("@")
    return rest if at else ""

def label_name(line: str) -> str:
    """Text between the first '(' and the first ')'."""
    s = squeeze(line)
    start = s.find("(")
    end = s.find(")")
    if start < 0 or end < 0 or end <= start:
        return ""
    return s[start + 1:end]

def _split_compute(line: str):
    s = squeeze(line)
    if "=" in s:
        dest, _, rest = s.partition("=")
    else:
        dest, rest = "", s
    comp, _, jump = rest.partition(";")
    return dest, comp, jump

def dest(line: str) -> str:
    return _split_compute(line)[0]

def comp(line: str) -> str:
    return _split_compute(line)[1]

def jump(line: str) -> str:
    return _split_compute(line)[2]
