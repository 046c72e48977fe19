#!/usr/bin/env python3
"""
Receive LoRa packets and print their hex values.

Flashes the LoStik LED (GPIO10) for every packet received.
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rn2903 import DigitalPin, ModulationMode, Rn2903, TransceiverBusy


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("port", help="serial port, e.g. /dev/ttyUSB0")
    parser.add_argument("--timeout", type=int, default=0,
                        help="receive window in symbols (0 waits for a packet)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    with Rn2903.open_at(args.port) as txvr:
        print(f"Successfully connected. Version: {txvr.system_version()}")

        print(f"MAC paused for {txvr.mac_pause()} ms")
        txvr.radio_set_modulation_mode(ModulationMode.LORA)
        txvr.system_set_pin_digital(DigitalPin.GPIO10, False)

        try:
            while True:
                try:
                    packet = txvr.radio_rx(args.timeout)
                except TransceiverBusy:
                    time.sleep(0.1)
                    continue

                if packet is None:
                    print("No packet in receive window")
                    continue

                print(packet.hex())
                txvr.system_set_pin_digital(DigitalPin.GPIO10, True)
                time.sleep(0.1)
                txvr.system_set_pin_digital(DigitalPin.GPIO10, False)
        except KeyboardInterrupt:
            pass


if __name__ == "__main__":
    main()
