"""Launch a circular gallery window: python run_gallery.py [items.json] [options]."""

import sys

from circular_gallery.cli import main

if __name__ == "__main__":
    sys.exit(main())
