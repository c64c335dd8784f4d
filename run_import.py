#!/usr/bin/env python
"""Run one stocks import cycle."""
import sys

from stocks_importer.main import main

if __name__ == "__main__":
    sys.exit(main())
