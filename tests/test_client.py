"""Tests for XpdfClient and XpdfConfig."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from pydantic import ValidationError
from xpdf_tools import (
    ExecutableNotFoundError,
    XpdfClient,
    XpdfConfig,
    XpdfToolError,
)


class TestXpdfConfig:
    """Tests for configuration loading."""

    def test_defaults(self):
        config = XpdfConfig()

        assert config.dpi == 300
        assert config.bin_dir is None
        assert config.text_encoding == "UTF-8"
        assert config.codec == "utf-8"
        assert config.executables == {}

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XPDF_BIN_DIR", str(tmp_path))
        monkeypatch.setenv("XPDF_DPI", "150")
        monkeypatch.setenv("XPDF_TEXT_ENCODING", "Latin1")

        config = XpdfConfig.from_env()

        assert config.bin_dir == tmp_path
        assert config.dpi == 150
        assert config.text_encoding == "Latin1"

    def test_overrides_win_over_env(self, monkeypatch):
        monkeypatch.setenv("XPDF_DPI", "150")

        assert XpdfConfig.from_env(dpi=72).dpi == 72

    def test_invalid_dpi(self):
        with pytest.raises(ValidationError):
            XpdfConfig(dpi=0)

    @pytest.mark.parametrize(
        "encoding,codec",
        [("Latin1", "iso8859-1"), ("ASCII7", "ascii"), ("UCS-2", "utf-16-be"), ("cp1252", "cp1252")],
    )
    def test_xpdf_encoding_names(self, encoding, codec):
        assert XpdfConfig(text_encoding=encoding).codec == codec

    @pytest.mark.parametrize("encoding", ["ZapfDingbats", "Symbol"])
    def test_encoding_without_codec_rejected(self, encoding):
        with pytest.raises(ValidationError, match="Unsupported text encoding"):
            XpdfConfig(text_encoding=encoding)


class TestXpdfClient:
    """Tests for executable resolution and process invocation."""

    def test_resolves_once_at_construction(self, tmp_path):
        with patch("xpdf_tools.xpdf.client.find_executable", return_value="/usr/bin/tool") as finder:
            client = XpdfClient(XpdfConfig(bundle_root=tmp_path))
            client.executable("pdfinfo")
            client.executable("pdfinfo")

        assert finder.call_count == 3
        assert client.executables == {
            "pdfinfo": "/usr/bin/tool",
            "pdftotext": "/usr/bin/tool",
            "pdftopng": "/usr/bin/tool",
        }

    def test_explicit_executables_skip_lookup(self):
        config = XpdfConfig(executables={"pdfinfo": "/custom/pdfinfo"})

        with patch("xpdf_tools.xpdf.client.find_executable", return_value=None):
            client = XpdfClient(config)

        assert client.executable("pdfinfo") == "/custom/pdfinfo"
        assert client.executables["pdftotext"] is None

    def test_missing_executable(self):
        with patch("xpdf_tools.xpdf.client.find_executable", return_value=None):
            client = XpdfClient(XpdfConfig())

        with pytest.raises(ExecutableNotFoundError):
            client.run("pdfinfo", ["file.pdf"])

    def test_run_returns_output(self, client):
        completed = subprocess.CompletedProcess([], 0, stdout="Pages: 1\n")
        with patch("xpdf_tools.xpdf.client.subprocess.run", return_value=completed) as run:
            output = client.run("pdfinfo", ["-box", Path("a.pdf")])

        assert output == "Pages: 1\n"
        cmd = run.call_args.args[0]
        assert cmd == ["/opt/xpdf/bin/pdfinfo", "-box", "a.pdf"]
        assert run.call_args.kwargs["stderr"] == subprocess.STDOUT

    def test_non_zero_status(self, client):
        completed = subprocess.CompletedProcess([], 3, stdout="Error: Couldn't open file\n")
        with patch("xpdf_tools.xpdf.client.subprocess.run", return_value=completed):
            with pytest.raises(XpdfToolError) as excinfo:
                client.run("pdfinfo", ["-box", "a.pdf"])

        assert excinfo.value.returncode == 3
        assert excinfo.value.command == "pdfinfo"
        assert "Couldn't open file" in excinfo.value.output
        assert "failed with return status 3" in str(excinfo.value)

    def test_spawn_failure(self, client):
        with patch("xpdf_tools.xpdf.client.subprocess.run", Mock(side_effect=FileNotFoundError("no such file"))):
            with pytest.raises(ExecutableNotFoundError):
                client.run("pdftotext", ["a.pdf", "out.txt"])
