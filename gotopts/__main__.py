"""
GotOpts

Copyright (c) 2025 Spencer James.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from typing import Sequence

from gotopts.gotopts_cli import GotOptsCli
from gotopts.utils import setup_logging


def main(argv: Sequence[str] | None = None) -> int:
    setup_logging()
    tool = GotOptsCli()
    return tool.run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
