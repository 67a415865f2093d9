#!/usr/bin/env python3
"""
og-image-generator Application

Generates an Open Graph social preview PNG from an article title and URL.
Same as the installed `og-image-generator` command.
"""

import sys

from ogimage.cli import main


if __name__ == "__main__":
    sys.exit(main())
