#!/usr/bin/env python3
"""
Connect to an RN2903 and print its firmware version.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rn2903 import Rn2903, Rn2903Error


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("port", help="serial port, e.g. /dev/ttyUSB0")
    parser.add_argument("-v", "--verbose", action="store_true", help="log protocol traffic")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    try:
        with Rn2903.open_at(args.port) as txvr:
            print(f"Successfully connected. Version: {txvr.system_version()}")
    except Rn2903Error as e:
        print(f"Could not talk to device: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
