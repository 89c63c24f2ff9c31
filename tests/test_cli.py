"""
Tests for the top6-codec command line tool
"""
import pytest

from top6.cli import main, parse_slot_args

from conftest import ADDR_A, ADDR_B, ADDR_C


def encoded_value(output: str) -> str:
    for line in output.splitlines():
        if line.strip().startswith("Value:"):
            return line.split("Value:")[1].strip()
    raise AssertionError(f"No value in output:\n{output}")


class TestCli:

    def test_parse_slot_args_pads_with_empties(self):
        assert parse_slot_args([ADDR_A, "-"], 4) == [ADDR_A, None, None, None]

    def test_encode_decode(self, capsys, addr_a, addr_b):
        assert main(["encode", ADDR_A, "-", ADDR_B, "--capacity", "6", "--mode", "positional"]) == 0
        out = capsys.readouterr().out
        assert "[+] Encoded 2 of 6 slots (positional)" in out
        assert "Size: 224 bytes" in out

        blob = encoded_value(out)
        assert main(["decode", blob, "--capacity", "6", "--mode", "positional"]) == 0
        out = capsys.readouterr().out
        assert f"[0] {addr_a}" in out
        assert "[1] (empty)" in out
        assert f"[2] {addr_b}" in out
        assert "[5] (empty)" in out

    def test_update(self, capsys, addr_c):
        main(["encode", ADDR_A, "-", ADDR_B, "-c", "6", "-m", "positional"])
        blob = encoded_value(capsys.readouterr().out)

        assert main(["update", blob, "1", ADDR_C, "-c", "6", "-m", "positional", "-v"]) == 0
        out = capsys.readouterr().out
        assert "[+] Updated slot 1" in out
        assert f"[1] {addr_c}" in out

    def test_too_many_slots(self, capsys):
        assert main(["encode", ADDR_A, ADDR_B, ADDR_C, "-c", "2", "-m", "compact"]) == 1
        assert "[ERROR] CapacityMismatch" in capsys.readouterr().out

    def test_malformed_blob(self, capsys):
        assert main(["decode", "0x" + "00" * 31 + "01", "-c", "6", "-m", "positional"]) == 1
        assert "[ERROR] MalformedBlob" in capsys.readouterr().out

    def test_index_out_of_range(self, capsys):
        main(["encode", ADDR_A, "-c", "6", "-m", "positional"])
        blob = encoded_value(capsys.readouterr().out)
        assert main(["update", blob, "6", "-", "-c", "6", "-m", "positional"]) == 1
        assert "[ERROR] IndexOutOfRange" in capsys.readouterr().out

    def test_calldata(self, capsys):
        main(["encode", ADDR_A, "-c", "6", "-m", "compact"])
        blob = encoded_value(capsys.readouterr().out)
        assert main(["calldata", blob]) == 0
        assert "0x7f23690c" in capsys.readouterr().out

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            main([])
