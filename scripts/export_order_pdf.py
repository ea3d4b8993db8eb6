"""
Export a rendered source (image or PDF) as a paginated order document.

Usage:
    python scripts/export_order_pdf.py receipt.png --order-id A1B2 --output-dir out
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path so we can import snapshot_pdf
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from snapshot_pdf.core.models import PAGE_FORMATS, page_format_by_name
from snapshot_pdf.exporter import ExportConfig, export_document
from snapshot_pdf.exporter.output import STRATEGIES


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Paginate a rendered source into a PDF.")
    parser.add_argument("source", type=Path, help="Image or PDF to paginate")
    parser.add_argument("--order-id", required=True, help="Identifier for order-<id>.pdf")
    parser.add_argument("--output-dir", type=Path, default=Path("."), help="Directory for the PDF")
    parser.add_argument("--page-format", default="a4", choices=sorted(PAGE_FORMATS))
    parser.add_argument("--strategy", default="offset", choices=STRATEGIES)
    parser.add_argument("--scale", type=float, default=2.0, help="Capture scale for PDF sources")
    parser.add_argument("--max-pages", type=int, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    config = ExportConfig(
        page_format=page_format_by_name(args.page_format),
        scale=args.scale,
        strategy=args.strategy,
        output_dir=args.output_dir,
        max_pages=args.max_pages,
    )
    result = export_document(args.order_id, args.source, config)

    if not result.success:
        print(f"[ERROR] {result.error}")
        return 1

    print(f"[OK] {result.page_count} page(s) written to {result.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
