"""Allow running the package with `python -m gh_release_asset`."""
import sys

from gh_release_asset.cli import main

if __name__ == '__main__':
    sys.exit(main())
