import csv, io, logging, os, struct

from bitarray import bitarray

from itemdb import InputError
from itemdb.constants import FactionRestriction
from itemdb.util import read_file

# Bit positions in ItemSparse Flags_1 (the second item flag word)
FLAG_FACTION_HORDE    = 0
FLAG_FACTION_ALLIANCE = 1

def flag_bits(value):
    barr = bitarray(endian = 'little')
    # Flag words are exported as signed 32 bit integers
    barr.frombytes(struct.pack('<I', value & 0xFFFFFFFF))
    return barr

def faction_restriction(flags):
    bits = flag_bits(flags)

    if bits[FLAG_FACTION_HORDE]:
        return FactionRestriction.HORDE_ONLY
    elif bits[FLAG_FACTION_ALLIANCE]:
        return FactionRestriction.ALLIANCE_ONLY

    return FactionRestriction.UNSPECIFIED

# Item id -> faction restriction, for restricted items only
def parse_faction_restrictions(contents, source = 'ItemSparse csv'):
    reader = csv.DictReader(io.StringIO(contents))
    if not reader.fieldnames or 'ID' not in reader.fieldnames or 'Flags_1' not in reader.fieldnames:
        raise InputError('{} is missing the ID or Flags_1 column'.format(source))

    restrictions = {}
    for record in reader:
        try:
            id_ = int(record['ID'])
            flags = int(record['Flags_1'] or 0)
        except ValueError as e:
            raise InputError('Invalid ItemSparse record in {} (line {}): {}'.format(
                source, reader.line_num, e))

        restriction = faction_restriction(flags)
        if restriction != FactionRestriction.UNSPECIFIED:
            restrictions[id_] = restriction

    return restrictions

def read_faction_restrictions(path):
    restrictions = parse_faction_restrictions(read_file(path), path)
    logging.info('Read %d faction restricted items from %s', len(restrictions), os.path.basename(path))
    return restrictions
