import logging, os

from itemdb import InputError, GlyphID
from itemdb.util import read_json

def read_glyph_ids(path):
    data = read_json(path)
    if not isinstance(data, list):
        raise InputError('{} does not contain a list of glyph ids'.format(path))

    glyph_ids = []
    for entry in data:
        try:
            glyph_ids.append(GlyphID(int(entry['itemId']), int(entry['spellId'])))
        except (KeyError, TypeError, ValueError) as e:
            raise InputError('Invalid glyph entry {!r} in {}: {}'.format(entry, path, e))

    logging.info('Read %d glyph ids from %s', len(glyph_ids), os.path.basename(path))
    return glyph_ids

# Encounter presets are passed through to the database as is
def read_encounters(path):
    data = read_json(path)
    if not isinstance(data, list):
        raise InputError('{} does not contain a list of encounter presets'.format(path))

    for encounter in data:
        if not isinstance(encounter, dict) or 'path' not in encounter:
            raise InputError('Encounter preset without a path in {}: {!r}'.format(path, encounter))

    logging.info('Read %d encounter presets from %s', len(data), os.path.basename(path))
    return data
