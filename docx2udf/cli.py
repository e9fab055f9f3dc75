"""
Command-line interface for docx2udf.

Usage:
    docx2udf input.docx
    docx2udf input.docx --output output.udf
    docx2udf input.docx --xml --output content.xml
    docx2udf --version
"""

import argparse
import logging
import sys
from pathlib import Path

from .api import convert_file
from .config import ConverterOptions
from .exceptions import ConverterError
from .utils import setup_logging
from .version import __version__

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docx2udf",
        description="Convert Word (.docx) documents to UYAP UDF documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  docx2udf petition.docx
  docx2udf petition.docx -o out/petition.udf
  docx2udf petition.docx --xml -o content.xml
        """,
    )
    parser.add_argument("input", nargs="?", help="Input DOCX file")
    parser.add_argument(
        "-o", "--output",
        help="Output file path (default: input name with .udf extension)"
    )
    parser.add_argument(
        "--xml",
        action="store_true",
        help="Write the raw UDF XML instead of the .udf container"
    )
    parser.add_argument(
        "--no-images",
        action="store_true",
        help="Drop embedded images"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: WARNING)"
    )
    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Plain log output instead of rich formatting"
    )
    parser.add_argument(
        "--version", "-v",
        action="store_true",
        help="Show version and exit"
    )
    return parser


def main(argv=None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"docx2udf {__version__}")
        return 0

    if not args.input:
        parser.print_help()
        return 1

    setup_logging(args.log_level, use_rich=not args.no_rich)

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1

    options = ConverterOptions(embed_images=not args.no_images)
    try:
        output_path = convert_file(input_path, args.output, options=options, xml_only=args.xml)
    except ConverterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Created: {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
