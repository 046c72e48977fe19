#!/usr/bin/env python3
"""
Get, modify, check, and restore the contents of NVM address 0x300.

GPIO10 is lit while reading and GPIO11 while writing.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rn2903 import DigitalPin, NvmAddress, Rn2903

TEST_VALUE = 0xAB


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("port", help="serial port, e.g. /dev/ttyUSB0")
    parser.add_argument("--address", type=lambda s: int(s, 0), default=0x300,
                        help="NVM address in 0x300..0x3FF")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    addr = NvmAddress(args.address)

    with Rn2903.open_at(args.port) as txvr:
        print(f"Successfully connected. Version: {txvr.system_version()}")

        txvr.system_module_reset()
        txvr.mac_pause()

        txvr.system_set_pin_digital(DigitalPin.GPIO10, True)
        prev = txvr.system_get_nvm(addr)
        print(f"Previous value: {prev:#x}")
        txvr.system_set_pin_digital(DigitalPin.GPIO10, False)

        txvr.system_set_pin_digital(DigitalPin.GPIO11, True)
        txvr.system_set_nvm(addr, TEST_VALUE)
        print("Wrote new value")
        txvr.system_set_pin_digital(DigitalPin.GPIO11, False)

        txvr.system_set_pin_digital(DigitalPin.GPIO10, True)
        new = txvr.system_get_nvm(addr)
        print(f"New value: {new:#x}")
        txvr.system_set_pin_digital(DigitalPin.GPIO10, False)

        txvr.system_set_pin_digital(DigitalPin.GPIO11, True)
        txvr.system_set_nvm(addr, prev)
        print("Restored old value")
        txvr.system_set_pin_digital(DigitalPin.GPIO11, False)


if __name__ == "__main__":
    main()
