import pytest
from hack_asm.parser import parse
from hack_asm.linker import first_pass
from hack_asm.symbols import SymbolTable
from hack_asm.diagnostics import DuplicateLabelError

MAX = """
// Calcula R2 = max(R0, R1)
   @R0
   D=M
   @R1
   D=D-M
   @OUTPUT_FIRST
   D;JGT
   @R1
   D=M
   @OUTPUT_D
   0;JMP
(OUTPUT_FIRST)
   @R0
   D=M
(OUTPUT_D)
   @R2
   M=D
(INFINITE_LOOP)
   @INFINITE_LOOP
   0;JMP
"""

def test_labels_point_to_next_instruction():
    r = first_pass(parse(MAX))
    assert r.symtab.labels() == {"OUTPUT_FIRST": 10, "OUTPUT_D": 12, "INFINITE_LOOP": 14}
    assert r.instruction_count == 16
    assert not r.diagnostics

def test_label_at_start():
    r = first_pass(parse("(LOOP)\n@LOOP\n0;JMP\n"))
    assert r.symtab.resolve("LOOP") == 0

def test_pass1_does_not_allocate_variables():
    r = first_pass(parse("@foo\nM=1\n"))
    assert r.symtab.variables() == {}
    assert "foo" not in r.symtab

def test_first_pass_is_idempotent():
    nodes = parse(MAX)
    a = first_pass(nodes).symtab.labels()
    b = first_pass(nodes).symtab.labels()
    assert a == b
    # también sobre la misma tabla
    st = SymbolTable()
    first_pass(nodes, st)
    first_pass(nodes, st)
    assert st.labels() == a

def test_duplicate_label_at_other_address_is_fatal():
    src = "(X)\n@1\n(X)\nD=A\n"
    with pytest.raises(DuplicateLabelError) as exc:
        first_pass(parse(src), filename="dup.asm")
    assert exc.value.diagnostic.line == 3
    assert "dup.asm:3" in str(exc.value.diagnostic)

def test_duplicate_label_at_same_address_is_a_note():
    r = first_pass(parse("(X)\n(X)\n@1\n"))
    assert r.symtab.resolve("X") == 0
    assert [d.severity for d in r.diagnostics] == ["nota"]

def test_commented_label_is_ignored():
    r = first_pass(parse("(X) // no\n@1\n"))
    assert "X" not in r.symtab
