"""Main CLI entry point for xpdf tools."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .. import ExtractorFactory, XpdfClient, XpdfConfig, __version__
from ..core.models import DocumentInfo


def _client(args) -> XpdfClient:
    return XpdfClient(XpdfConfig.from_env(bin_dir=args.bin_dir))


def _format_info(info: DocumentInfo) -> str:
    lines = []
    for name, value in info.model_dump(exclude_none=True).items():
        if isinstance(value, dict):
            value = " ".join(f"{v}" for v in value.values() if v is not None)
        lines.append(f"{name}: {value}")
    return "\n".join(lines)


def info_command(args):
    """Print the metadata of a PDF file."""
    try:
        extractor = ExtractorFactory.create("info", client=_client(args))
        info = extractor.extract(args.input).info

        if args.format == 'json':
            output = info.model_dump_json(indent=2)
        else:
            output = _format_info(info)

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(output, encoding='utf-8')
            print(f"Document info saved to: {output_path}")
        else:
            print(output)

    except Exception as e:
        print(f"Error reading info from {args.input}: {e}", file=sys.stderr)
        sys.exit(1)


def text_command(args):
    """Extract the text of a PDF file page by page."""
    try:
        extractor = ExtractorFactory.create("text", client=_client(args))
        result = extractor.extract(args.input, save_dir=args.output_dir)
        text = "\f".join(page.text for page in result.text)

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text, encoding='utf-8')
            print(f"Extracted text saved to: {output_path}")
        else:
            print(text)

    except Exception as e:
        print(f"Error extracting text from {args.input}: {e}", file=sys.stderr)
        sys.exit(1)


def png_command(args):
    """Rasterize the pages of a PDF file into PNG images."""
    try:
        extractor = ExtractorFactory.create(
            "png", client=_client(args), dpi=args.dpi, strict=args.strict
        )
        result = extractor.extract(args.input, save_dir=args.output_dir)

        for page in result.images:
            if page.ok:
                print(f"Page {page.page_number}: {page.image.width}x{page.image.height}")
            else:
                print(f"Page {page.page_number}: {page.error}", file=sys.stderr)
        print(f"Page images saved to: {args.output_dir}")

    except Exception as e:
        print(f"Error rasterizing {args.input}: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: Optional[list] = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="xpdf-tools",
        description="Structured access to the Xpdf pdfinfo, pdftotext and pdftopng utilities"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"xpdf-tools {__version__}"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress messages")
    parser.add_argument("--bin-dir", type=Path, help="Directory containing the Xpdf executables")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Info command
    info_parser = subparsers.add_parser("info", help="Show document metadata (pdfinfo -box)")
    info_parser.add_argument("input", type=Path, help="Input PDF file")
    info_parser.add_argument("--output", type=Path, help="Output file")
    info_parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="Output format",
    )
    info_parser.set_defaults(func=info_command)

    # Text command
    text_parser = subparsers.add_parser("text", help="Extract text per page (pdftotext -table)")
    text_parser.add_argument("input", type=Path, help="Input PDF file")
    text_parser.add_argument("--output", type=Path, help="Output text file")
    text_parser.add_argument("--output-dir", type=Path, help="Directory to save the extracted text")
    text_parser.set_defaults(func=text_command)

    # PNG command
    png_parser = subparsers.add_parser("png", help="Rasterize pages to PNG (pdftopng)")
    png_parser.add_argument("input", type=Path, help="Input PDF file")
    png_parser.add_argument("--output-dir", type=Path, required=True, help="Directory for the page images")
    png_parser.add_argument("--dpi", type=int, default=None, help="Raster resolution (defaults to XPDF_DPI or 300)")
    png_parser.add_argument("--strict", action="store_true", help="Fail on the first page that cannot be decoded")
    png_parser.set_defaults(func=png_command)

    # Parse arguments
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    # Execute command
    args.func(args)


if __name__ == "__main__":
    main()
