"""Integration tests against real pdfinfo binaries, skipped when none is installed."""

import pytest
from PIL import Image
from xpdf_tools import XpdfClient, XpdfConfig, xpdf_info

client = XpdfClient(XpdfConfig())

pytestmark = pytest.mark.skipif(
    client.executables["pdfinfo"] is None, reason="pdfinfo is not installed"
)


@pytest.fixture
def three_page_pdf(tmp_path):
    path = tmp_path / "three_pages.pdf"
    pages = [Image.new("RGB", (200, 100), color) for color in ("white", "gray", "black")]
    pages[0].save(path, save_all=True, append_images=pages[1:])
    return path


def test_page_count(three_page_pdf):
    info = xpdf_info(three_page_pdf, client=client)

    assert info.pages == 3


def test_boxes_have_four_ordered_coordinates(three_page_pdf):
    info = xpdf_info(three_page_pdf, client=client)

    for box in info.boxes().values():
        assert len(box.as_tuple()) == 4
        assert box.x2 > box.x1
        assert box.y2 > box.y1


def test_repeatable(three_page_pdf):
    assert xpdf_info(three_page_pdf, client=client) == xpdf_info(three_page_pdf, client=client)
