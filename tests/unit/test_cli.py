"""
CLI Unit Tests
Tests for merkle_cli/main.py and the root/prove/verify/graph commands.

Commands are driven through main(argv) and checked on exit code and
captured stdout.
"""
import json
import logging

import pytest

from canonical_merkle.crypto.hashing import sha256
from merkle_cli.main import create_parser, main

from fixtures import HEX_A, HEX_C, HEX_D, ODD_TREE_ROOT, ODD_TREE_PROOFS, EVEN_TREE_ROOT


ITEMS = ["a", "b", "c", "d", "e"]


@pytest.fixture(autouse=True)
def _reset_logging():
    """main() installs handlers on the root logger; drop them after each test."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)


def _stdout(capsys) -> str:
    return capsys.readouterr().out


# =============================================================================
# Parser
# =============================================================================

class TestParser:
    """Tests for argument parsing."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage: merkle" in _stdout(capsys)

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert "merkle 0.1.0" in _stdout(capsys)

    def test_prove_requires_leaf(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["prove", "a", "b"])


# =============================================================================
# root
# =============================================================================

class TestRootCommand:
    """Tests for `merkle root`."""

    def test_root_of_odd_set(self, capsys):
        assert main(["root", *ITEMS]) == 0
        assert _stdout(capsys).strip() == ODD_TREE_ROOT

    def test_root_is_order_independent(self, capsys):
        assert main(["root", "e", "c", "a", "d", "b"]) == 0
        assert _stdout(capsys).strip() == ODD_TREE_ROOT

    def test_root_json(self, capsys):
        assert main(["root", "a", "b", "c", "d", "--json"]) == 0
        summary = json.loads(_stdout(capsys))

        assert summary["algorithm"] == "sha256"
        assert summary["root"] == EVEN_TREE_ROOT
        assert summary["leaf_count"] == 4
        assert summary["depth"] == 3
        assert summary["leaves"] == sorted(summary["leaves"])

    def test_root_from_file(self, capsys, tmp_path):
        leaves_file = tmp_path / "leaves.txt"
        leaves_file.write_text("c\n\nd\ne\n")

        assert main(["root", "a", "b", "--file", str(leaves_file)]) == 0
        assert _stdout(capsys).strip() == ODD_TREE_ROOT

    def test_root_hex_leaves(self, capsys):
        digests = [sha256(item.encode()).hex() for item in ITEMS]

        assert main(["root", "--hex-leaves", *digests]) == 0
        assert _stdout(capsys).strip() == ODD_TREE_ROOT

    def test_root_single_leaf(self, capsys):
        assert main(["root", "a"]) == 0
        assert _stdout(capsys).strip() == HEX_A

    def test_root_without_leaves_fails(self, capsys):
        assert main(["root"]) == 1
        assert "empty" in capsys.readouterr().err

    def test_unknown_algorithm_fails(self, capsys):
        assert main(["--algorithm", "nope", "root", "a"]) == 1
        assert "Unsupported hash algorithm" in capsys.readouterr().err

    def test_algorithm_from_env(self, capsys, monkeypatch):
        monkeypatch.setenv("MERKLE_HASH_ALGORITHM", "sha512")

        assert main(["root", "a"]) == 0
        assert len(_stdout(capsys).strip()) == 128

    def test_algorithm_from_config_file(self, capsys, tmp_path):
        config_file = tmp_path / "merkle.yaml"
        config_file.write_text("hash:\n  algorithm: sha512\n")

        assert main(["--config", str(config_file), "root", "a"]) == 0
        assert len(_stdout(capsys).strip()) == 128

    def test_missing_config_file_fails(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "missing.yaml"), "root", "a"]) == 1
        assert "Error loading configuration" in capsys.readouterr().err


# =============================================================================
# prove / verify
# =============================================================================

class TestProveCommand:
    """Tests for `merkle prove`."""

    def test_prove_to_stdout(self, capsys):
        assert main(["prove", "--leaf", "c", *ITEMS]) == 0
        document = json.loads(_stdout(capsys))

        assert document["leaf"] == HEX_C
        assert document["root"] == ODD_TREE_ROOT
        assert document["siblings"] == ODD_TREE_PROOFS[HEX_C]
        assert document["status"] == "found"
        assert document["algorithm"] == "sha256"

    def test_prove_to_file(self, capsys, tmp_path):
        out = tmp_path / "proof.json"

        assert main(["prove", "--leaf", "d", *ITEMS, "--out", str(out)]) == 0
        assert _stdout(capsys) == ""

        document = json.loads(out.read_text())
        assert document["siblings"] == ODD_TREE_PROOFS[HEX_D]

    def test_prove_single_leaf_is_root(self, capsys):
        assert main(["prove", "--leaf", "a", "a"]) == 0
        document = json.loads(_stdout(capsys))

        assert document["status"] == "is_root"
        assert document["siblings"] == []

    def test_prove_missing_leaf(self, capsys):
        assert main(["prove", "--leaf", "z", *ITEMS]) == 2
        captured = capsys.readouterr()

        assert json.loads(captured.out)["status"] == "not_found"
        assert "Leaf not found" in captured.err


class TestVerifyCommand:
    """Tests for `merkle verify`."""

    def test_verify_proof_file(self, capsys, tmp_path):
        out = tmp_path / "proof.json"
        assert main(["prove", "--leaf", "b", *ITEMS, "--out", str(out)]) == 0
        capsys.readouterr()

        assert main(["verify", "--proof", str(out)]) == 0
        assert _stdout(capsys).strip() == "valid: true"

    def test_verify_components(self, capsys):
        args = ["verify", "--leaf", HEX_D, "--root", ODD_TREE_ROOT]
        for sibling in ODD_TREE_PROOFS[HEX_D]:
            args += ["--sibling", sibling]

        assert main(args) == 0
        assert _stdout(capsys).strip() == "valid: true"

    def test_verify_tampered_sibling(self, capsys):
        siblings = list(ODD_TREE_PROOFS[HEX_D])
        siblings[1] = "00" * 32
        args = ["verify", "--leaf", HEX_D, "--root", ODD_TREE_ROOT]
        for sibling in siblings:
            args += ["--sibling", sibling]

        assert main(args) == 2
        assert _stdout(capsys).strip() == "valid: false"

    def test_verify_json(self, capsys):
        args = ["verify", "--json", "--leaf", HEX_C, "--root", ODD_TREE_ROOT]
        for sibling in ODD_TREE_PROOFS[HEX_C]:
            args += ["-s", sibling]

        assert main(args) == 0
        report = json.loads(_stdout(capsys))

        assert report["valid"] is True
        assert report["siblings"] == 3

    def test_verify_wrong_algorithm(self, capsys):
        args = ["--algorithm", "sha512", "verify", "--leaf", HEX_D, "--root", ODD_TREE_ROOT]
        for sibling in ODD_TREE_PROOFS[HEX_D]:
            args += ["--sibling", sibling]

        assert main(args) == 2

    def test_verify_needs_input(self, capsys):
        assert main(["verify"]) == 1
        assert "--proof" in capsys.readouterr().err

    def test_verify_missing_proof_file(self, capsys, tmp_path):
        assert main(["verify", "--proof", str(tmp_path / "nope.json")]) == 1
        assert "Proof file not found" in capsys.readouterr().err

    def test_verify_bad_hex(self, capsys):
        assert main(["verify", "--leaf", "xyz", "--root", ODD_TREE_ROOT]) == 1
        assert "Invalid proof" in capsys.readouterr().err

    def test_verify_json_reports_root_mismatch(self, capsys):
        args = ["verify", "--json", "--leaf", HEX_D, "--root", ODD_TREE_ROOT, "-s", HEX_A]

        assert main(args) == 2
        report = json.loads(_stdout(capsys))

        assert report["valid"] is False
        assert report["error"]["code"] == "ROOT_MISMATCH"

    def test_verify_json_reports_leaf_not_found(self, capsys, tmp_path):
        out = tmp_path / "proof.json"
        assert main(["prove", "--leaf", "z", *ITEMS, "--out", str(out)]) == 2
        capsys.readouterr()

        assert main(["verify", "--json", "--proof", str(out)]) == 2
        assert json.loads(_stdout(capsys))["error"]["code"] == "LEAF_NOT_FOUND"

    def test_valid_json_report_has_no_error(self, capsys):
        args = ["verify", "--json", "--leaf", HEX_C, "--root", ODD_TREE_ROOT]
        for sibling in ODD_TREE_PROOFS[HEX_C]:
            args += ["-s", sibling]

        assert main(args) == 0
        assert json.loads(_stdout(capsys))["error"] is None

    def test_prove_then_verify_other_algorithm(self, capsys, tmp_path):
        out = tmp_path / "proof.json"
        assert main(["--algorithm", "sha512", "prove", "--leaf", "c", *ITEMS, "--out", str(out)]) == 0
        assert json.loads(out.read_text())["algorithm"] == "sha512"
        capsys.readouterr()

        assert main(["verify", "--proof", str(out)]) == 0
        assert _stdout(capsys).strip() == "valid: true"


# =============================================================================
# graph
# =============================================================================

class TestGraphCommand:
    """Tests for `merkle graph`."""

    def test_graph(self, capsys):
        assert main(["graph", *ITEMS]) == 0
        lines = _stdout(capsys).splitlines()

        assert lines[0] == f"└─ {ODD_TREE_ROOT}"
        assert lines[-1] == f"   └─ {HEX_A}"
        assert len(lines) == 9


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
