"""
Tests for the demonstration entry point.
"""

import pytest

import main


class TestMain:
    """Tests for main.py."""

    def test_demo_both_modes(self, capsys: pytest.CaptureFixture) -> None:
        assert main.main(["--cipher", "AES-128-CBC"]) == 0

        out = capsys.readouterr().out
        assert "== raw (AES-128-CBC)" in out
        assert "== text_safe (AES-128-CBC)" in out
        assert out.count("read:   'some private data'") == 2
        assert out.count("stored: 'some public data'") == 2

    def test_single_mode(self, capsys: pytest.CaptureFixture) -> None:
        assert main.main(["--cipher", "DES-EDE3-CBC", "--encoding", "text_safe"]) == 0

        out = capsys.readouterr().out
        assert "== raw" not in out
        assert "read:   'some private data'" in out

    def test_list_ciphers(self, capsys: pytest.CaptureFixture) -> None:
        assert main.main(["--list-ciphers"]) == 0

        assert "AES-128-CBC" in capsys.readouterr().out.split()

    def test_unsupported_cipher(self, capsys: pytest.CaptureFixture) -> None:
        assert main.main(["--cipher", "NOPE-CBC"]) == 1

        assert "not available" in capsys.readouterr().err
