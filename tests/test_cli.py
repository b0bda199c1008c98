"""Tests for the feltcheck command line."""

import json

import pytest

from feltcheck.cli import main, EXIT_MATCH, EXIT_MISMATCH, EXIT_NO_CLAIM, EXIT_ERROR
from feltcheck.field import FELT_PRIME
from feltcheck.program_hash import executable_program_hash


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


def proof_doc(program, output=()):
    return {"claim": {"public_data": {"public_memory": {
        "program": program,
        "output": list(output),
    }}}}


@pytest.fixture
def executable(tmp_path):
    return write_json(tmp_path / "exe.json", {"program": {"bytecode": ["0x1"]}})


class TestFelt:

    def test_decimal(self, capsys):
        assert main(["felt", "0xff"]) == 0
        assert capsys.readouterr().out.strip() == "255"

    def test_hex(self, capsys):
        assert main(["felt", "0xff", "--radix", "hex"]) == 0
        assert capsys.readouterr().out.strip() == "0xff"

    def test_negative_after_double_dash(self, capsys):
        assert main(["felt", "--", "-0x1"]) == 0
        assert capsys.readouterr().out.strip() == str(FELT_PRIME - 1)

    def test_negative_decimal_digits(self, capsys):
        assert main(["felt", "-1"]) == 0
        assert capsys.readouterr().out.strip() == str(FELT_PRIME - 1)

    def test_radix_equals_form(self, capsys):
        assert main(["felt", "--radix=hex", "0xff"]) == 0
        assert capsys.readouterr().out.strip() == "0xff"

    def test_radix_before_signed_operand(self, capsys):
        assert main(["felt", "--radix", "hex", "--", "-0x1"]) == 0
        assert capsys.readouterr().out.strip() == hex(FELT_PRIME - 1)

    def test_signed_operand_needs_double_dash(self):
        with pytest.raises(SystemExit):
            main(["felt", "--radix", "hex", "-0x1"])

    def test_lone_sign_is_error(self):
        assert main(["felt", "--", "-"]) == EXIT_ERROR


class TestHashProgram:

    def test_prints_digest(self, executable, capsys):
        assert main(["hash-program", executable]) == 0
        assert capsys.readouterr().out.strip() == executable_program_hash(["0x1"])

    def test_missing_file(self, tmp_path):
        assert main(["hash-program", str(tmp_path / "nope.json")]) == EXIT_ERROR

    def test_bad_digest_size(self, executable):
        assert main(["hash-program", executable, "--digest-size", "64"]) == EXIT_ERROR


class TestCompare:

    def test_match(self, tmp_path, executable, capsys):
        proof = write_json(tmp_path / "proof.json", proof_doc([[0, [1, 0, 0, 0, 0, 0, 0, 0]]]))
        assert main(["compare", proof, executable]) == EXIT_MATCH
        out = capsys.readouterr().out
        assert "Match:      yes" in out
        assert executable_program_hash(["0x1"]) in out

    def test_mismatch(self, tmp_path, executable, capsys):
        proof = write_json(tmp_path / "proof.json", proof_doc([[0, [2, 0, 0, 0, 0, 0, 0, 0]]]))
        assert main(["compare", proof, executable]) == EXIT_MISMATCH
        assert "Match:      no" in capsys.readouterr().out

    def test_no_claim(self, tmp_path, executable, capsys):
        proof = write_json(tmp_path / "proof.json", proof_doc([]))
        assert main(["compare", proof, executable]) == EXIT_NO_CLAIM
        assert "No program bytecode in claim" in capsys.readouterr().out

    def test_malformed_claim(self, tmp_path, executable):
        proof = write_json(tmp_path / "proof.json", proof_doc([[0, [1] * 7]]))
        assert main(["compare", proof, executable]) == EXIT_ERROR

    def test_invalid_json(self, tmp_path, executable):
        proof = tmp_path / "proof.json"
        proof.write_text("{", encoding="utf-8")
        assert main(["compare", str(proof), executable]) == EXIT_ERROR


class TestOutputs:

    def test_lists_outputs(self, tmp_path, capsys):
        proof = write_json(tmp_path / "proof.json", proof_doc([], [
            [1, [5, 0, 0, 0, 0, 0, 0, 0]],
            [1, [0, 1, 0, 0, 0, 0, 0, 0]],
        ]))
        assert main(["outputs", proof]) == 0
        assert capsys.readouterr().out.splitlines() == ["[0]: 5", f"[1]: {1 << 32}"]

    def test_no_outputs(self, tmp_path, capsys):
        proof = write_json(tmp_path / "proof.json", proof_doc([]))
        assert main(["outputs", proof]) == 0
        assert capsys.readouterr().out.strip() == "No outputs claimed"

    def test_reduce(self, tmp_path, capsys):
        proof = write_json(tmp_path / "proof.json", proof_doc([], [[1, [0xFFFFFFFF] * 8]]))
        assert main(["outputs", proof]) == 0
        assert capsys.readouterr().out.strip() == f"[0]: {2**256 - 1}"
        assert main(["outputs", proof, "--reduce"]) == 0
        assert capsys.readouterr().out.strip() == f"[0]: {(2**256 - 1) % FELT_PRIME}"
