"""Shared fixtures: canned pdfinfo output and a fake Xpdf process runner."""

import os
import subprocess
import sys
from pathlib import Path

import pytest
from PIL import Image

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from xpdf_tools import XpdfClient, XpdfConfig
from xpdf_tools.config import python_codec


PDFINFO_OUTPUT = """\
Title:          RPC Phantom
Subject:        
Keywords:       
Author:         Mark Geurts
Creator:        Microsoft Word
Producer:       Mac OS X 10.10.2 Quartz PDFContext
CreationDate:   Tue Mar  3 10:22:11 2015
ModDate:        03/03/15 10:22:11
Tagged:         no
Form:           none
Pages:          3
Encrypted:      no
Page size:      612 x 792 pts (letter)
MediaBox:           0.00     0.00   612.00   792.00
CropBox:            0.00     0.00   612.00   792.00
BleedBox:           0.00     0.00   612.00   792.00
TrimBox:            0.00     0.00   612.00   792.00
ArtBox:             0.00     0.00   612.00   792.00
File size:      48213 bytes
Optimized:      no
PDF version:    1.3
"""

PAGE_TEXT = {
    1: "RPC Phantom Report\n\nPlan   Dose   Result\n\f",
    2: "Page two\n  indented line\n\f",
    3: "\f",
}


class FakeXpdf:
    """Stands in for ``subprocess.run`` and mimics the three Xpdf tools."""

    def __init__(self, info_output=PDFINFO_OUTPUT, page_text=None, broken_pages=(), fail=None):
        self.info_output = info_output
        self.page_text = page_text or PAGE_TEXT
        self.broken_pages = set(broken_pages)
        self.fail = fail or {}
        self.calls = []

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        tool = Path(cmd[0]).name
        if tool in self.fail:
            return subprocess.CompletedProcess(cmd, self.fail[tool], stdout="Error: failed\n")
        if tool == "pdfinfo":
            return subprocess.CompletedProcess(cmd, 0, stdout=self.info_output)
        if tool == "pdftotext":
            page = int(cmd[cmd.index("-f") + 1])
            codec = python_codec(cmd[cmd.index("-enc") + 1])
            Path(cmd[-1]).write_bytes(self.page_text[page].encode(codec))
            return subprocess.CompletedProcess(cmd, 0, stdout="")
        if tool == "pdftopng":
            prefix = cmd[-1]
            for page in self.page_text:
                path = f"{prefix}-{page:06d}.png"
                if page in self.broken_pages:
                    Path(path).write_bytes(b"not a png")
                else:
                    Image.new("RGB", (10 * page, 20), color=(page, 0, 0)).save(path)
            return subprocess.CompletedProcess(cmd, 0, stdout="")
        raise AssertionError(f"unexpected command {cmd}")

    def tools(self):
        return [Path(call[0]).name for call in self.calls]


@pytest.fixture
def sample_pdf(tmp_path):
    path = tmp_path / "RPC_Phantom.pdf"
    path.write_bytes(b"%PDF-1.3\n%%EOF\n")
    return path


@pytest.fixture
def client(tmp_path):
    config = XpdfConfig(
        executables={
            "pdfinfo": "/opt/xpdf/bin/pdfinfo",
            "pdftotext": "/opt/xpdf/bin/pdftotext",
            "pdftopng": "/opt/xpdf/bin/pdftopng",
        }
    )
    return XpdfClient(config)


@pytest.fixture
def fake_xpdf(monkeypatch):
    fake = FakeXpdf()
    monkeypatch.setattr("xpdf_tools.xpdf.client.subprocess.run", fake)
    return fake
