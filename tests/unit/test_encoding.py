import pytest
from hack_asm.parser import parse
from hack_asm.linker import first_pass
from hack_asm.encoding import (
    encode, encode_dest, encode_comp, encode_jump, encode_address, encode_compute,
)
from hack_asm.isa import COMP, DEST, JUMP

def _pipe(src: str, **kw):
    nodes = parse(src)
    link = first_pass(nodes)
    enc = encode(nodes, link.symtab, **kw)
    return enc, link

def test_fields_are_case_insensitive():
    for m in COMP:
        assert encode_comp(m.lower()) == encode_comp(m)
    for m in DEST:
        assert encode_dest(m.lower()) == encode_dest(m)
    for m in JUMP:
        assert encode_jump(m.lower()) == encode_jump(m)

def test_encode_address_and_compute():
    assert encode_address(2) == "0000000000000010"
    assert encode_compute("D", "A", "") == "1110110000010000"
    assert encode_compute("", "0", "JMP") == "1110101010000111"
    assert encode_compute("AM", "M+1", "") == "1111110111101000"

def test_two_instruction_program():
    enc, _ = _pipe("@2\nD=A\n")
    assert [w.bits for w in enc.words] == ["0000000000000010", "1110110000010000"]
    assert [w.pc for w in enc.words] == [0, 1]

def test_label_resolves_to_address_zero():
    enc, _ = _pipe("(LOOP)\n@LOOP\n0;JMP\n")
    assert enc.words[0].bits == "0000000000000000"
    assert enc.words[1].bits == "1110101010000111"

def test_variables_allocated_from_16():
    enc, link = _pipe("@foo\nM=0\n@bar\nM=1\n@foo\nD=M\n")
    a_words = [w.word for w in enc.words if w.bits[0] == "0"]
    assert a_words == [16, 17, 16]
    assert link.symtab.variables() == {"foo": 16, "bar": 17}

def test_predefined_and_labels_are_not_variables():
    enc, link = _pipe("@SCREEN\nD=A\n@R13\n(END)\n@END\n")
    assert [w.word for w in enc.words] == [16384, int("1110110000010000", 2), 13, 3]
    assert link.symtab.variables() == {}

def test_comment_lines_produce_no_output():
    enc, _ = _pipe("@5 // cinco\nD=A // d\n// solo\n\n@7\n")
    assert [w.bits for w in enc.words] == ["0000000000000111"]

def test_address_overflow_warns_and_keeps_low_bits():
    enc, _ = _pipe("@32769\n")
    assert enc.words[0].bits == "0000000000000001"
    assert [d.severity for d in enc.diagnostics] == ["advertencia"]

def test_huge_address_literal_warns_instead_of_failing():
    enc, _ = _pipe("@" + "1" * 5000 + "\n")
    assert len(enc.words) == 1
    assert len(enc.words[0].bits) == 16
    assert [d.severity for d in enc.diagnostics] == ["advertencia"]
    # el mensaje no arrastra los 5000 dígitos
    assert len(enc.diagnostics[0].message) < 200

def test_variable_operand_takes_allocated_address():
    enc, _ = _pipe("@i\n@j\n@i\n", filename="v.asm")
    assert [w.word for w in enc.words] == [16, 17, 16]
    assert not enc.diagnostics

def test_invalid_compute_mnemonic_is_reported():
    enc, _ = _pipe("@1\nD=Q\nX=D\nD;JXX\n@2\n", filename="bad.asm")
    assert len(enc.diagnostics) == 3
    assert all(d.severity == "error" for d in enc.diagnostics)
    assert [d.line for d in enc.diagnostics] == [2, 3, 4]
    # las palabras válidas mantienen su dirección
    assert [w.pc for w in enc.words] == [0, 4]

@pytest.mark.parametrize("src, canonical, legacy", [
    ("D=!A", "1110110001010000", "1110110011010000"),
    ("D;JGE", "1110001100000011", "1110001100000001"),
])
def test_legacy_tables(src, canonical, legacy):
    assert _pipe(src)[0].words[0].bits == canonical
    assert _pipe(src, legacy=True)[0].words[0].bits == legacy

