"""
Run with: python -m bezierblob
"""
import sys

from bezierblob.main import main

if __name__ == "__main__":
    sys.exit(main())
