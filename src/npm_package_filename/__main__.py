# SPDX-License-Identifier: MIT
"""Allow running as ``python -m npm_package_filename``."""

from .cli import main

if __name__ == "__main__":
    main()
