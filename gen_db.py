#!/usr/bin/env python3

import argparse, sys, logging

try:
    from bitarray import bitarray
except Exception as error:
    print('ERROR: %s, gen_db.py requires the Python bitarray (https://pypi.python.org/pypi/bitarray) package to function' % error, file = sys.stderr)
    sys.exit(1)

from itemdb import ItemDBError
from itemdb.builder import DatabaseBuilder
from itemdb.config import Config

def main(argv = None):
    logging.basicConfig(level = logging.INFO,
            datefmt = '%Y-%m-%d %H:%M:%S',
            format = '[%(asctime)s] %(levelname)s: %(message)s')

    parser = argparse.ArgumentParser(usage = "%(prog)s [-iotc] [--debug] [CONFIG]")
    parser.add_argument("-i", "--inputs",  dest = "inputs",  default = 'assets/db_inputs',
                        help = "Input directory with scraped tooltips and item data [assets/db_inputs]")
    parser.add_argument("-o", "--output",  dest = "output",  default = 'assets/database',
                        help = "Output directory for db.json and leftover_db.json [assets/database]")
    parser.add_argument("-t", "--talents", dest = "talents", default = 'ui/core/talents/trees',
                        help = "Talent tree json directory [ui/core/talents/trees]")
    parser.add_argument("--debug",         dest = "debug",   default = False, action = "store_true")
    parser.add_argument("config", metavar = "CONFIG", type = str, nargs = '?', default = None,
                        help = "Optional ini file with paths and additional deny/allow ids")
    options = parser.parse_args(argv)

    if options.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    config = Config(options)
    if not config.open():
        return 1

    try:
        DatabaseBuilder(config).run()
    except ItemDBError as e:
        logging.error('%s', e)
        return 1

    return 0

if __name__ == '__main__':
    sys.exit(main())
