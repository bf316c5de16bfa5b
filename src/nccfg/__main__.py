# SPDX-FileCopyrightText: 2025-present William Born <william.born.git@gmail.com>
#
# SPDX-License-Identifier: MIT
"""Main entry point for the nccfg CLI."""

import sys

if __name__ == "__main__":
    from nccfg.cli import nccfg

    sys.exit(nccfg())
