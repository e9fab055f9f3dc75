"""
Entry point for running docx2udf as a module.

Usage:
    python -m docx2udf input.docx --output output.udf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
