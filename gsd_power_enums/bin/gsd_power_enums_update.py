#!/usr/bin/env python3
#
# gsd-power-enums-update - print the power plugin's constant tables

import click
import sys

from gsd_power_enums.driver import run
from gsd_power_enums.errors import GsdPowerEnumsError
from gsd_power_enums.globals import VERSION
from gsd_power_enums.prints import print_error
from gsd_power_enums.tools import setup_logger

@click.command()
@click.option("--debug", is_flag=True, help="Show debug info on stderr")
@click.option("--version", is_flag=True, help="Show currently installed version")
def main(debug, version):
    if version:
        print(f"gsd-power-enums-update {VERSION}")
        sys.exit(0)

    setup_logger(debug)

    try: run()
    except GsdPowerEnumsError as e:
        print_error(e)
        sys.exit(1)

if __name__ == "__main__": main()
