#!/usr/bin/env python3
"""
Reset the module and toggle GPIO10 on and off.

GPIO10 drives the blue user LED on the LoStik.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rn2903 import DigitalPin, Rn2903


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("port", help="serial port, e.g. /dev/ttyUSB0")
    parser.add_argument("--period", type=float, default=1.0, help="seconds per LED state")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    with Rn2903.open_at(args.port) as txvr:
        print(f"Successfully connected. Version: {txvr.system_version()}")

        txvr.system_module_reset()
        txvr.mac_pause()

        print("Blinking (Ctrl+C to stop)...")
        try:
            while True:
                txvr.system_set_pin_digital(DigitalPin.GPIO10, True)
                time.sleep(args.period)
                txvr.system_set_pin_digital(DigitalPin.GPIO10, False)
                time.sleep(args.period)
        except KeyboardInterrupt:
            txvr.system_set_pin_digital(DigitalPin.GPIO10, False)


if __name__ == "__main__":
    main()
