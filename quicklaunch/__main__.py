"""
Run one search from the command line and print the results as JSON.

Usage:
  python -m quicklaunch QUERY
"""

import json
import sys

from quicklaunch.core import LauncherCore


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print(__doc__.strip(), file=sys.stderr)
        return 2

    core = LauncherCore()
    core.initialize()
    print(json.dumps(core.search_payload(" ".join(argv)), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
