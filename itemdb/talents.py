import logging, os

from itemdb import ConfigurationError, InputError, constants
from itemdb.util import read_json, int_list

# Spell ids for every rank of a single talent. Omitted ranks are inferred by
# incrementing from the last given rank, so at least one id is required for
# talents that have ranks.
def talent_spell_ids(talent, source = 'talent config'):
    name = talent.get('fieldName', '<unnamed>')
    spell_ids = int_list(talent.get('spellIds', []), source)
    max_points = talent.get('maxPoints', 0)

    if len(spell_ids) >= max_points:
        return spell_ids

    if len(spell_ids) == 0:
        raise ConfigurationError('Talent "{}" in {} has {} ranks, but no spell ids to infer them from'.format(
            name, source, max_points))

    spell_id = spell_ids[-1]
    for _ in range(len(spell_ids), max_points):
        spell_id += 1
        spell_ids.append(spell_id)

    return spell_ids

def tree_spell_ids(trees, source = 'talent config'):
    if not isinstance(trees, list):
        raise InputError('{} does not contain a list of talent trees'.format(source))

    spell_ids = []
    for tree in trees:
        for talent in tree.get('talents', []):
            spell_ids += talent_spell_ids(talent, source)

    return spell_ids

def read_talent_spell_ids(path):
    return tree_spell_ids(read_json(path), path)

# Talent tree name (file name without extension) -> spell ids
def read_all_talent_spell_ids(talent_dir, tree_files = None):
    spell_ids = {}

    for file_name in tree_files or constants.TALENT_TREE_FILES:
        name = os.path.splitext(file_name)[0]
        spell_ids[name] = read_talent_spell_ids(os.path.join(talent_dir, file_name))
        logging.debug('%s: %d talent spell ids', name, len(spell_ids[name]))

    return spell_ids

# Rotation name -> spell ids used by the rotation, exported by the sim
def read_rotation_spell_ids(path):
    data = read_json(path)
    if not isinstance(data, dict):
        raise InputError('{} does not contain a rotation name to spell id mapping'.format(path))

    rotations = {}
    for name, spell_ids in data.items():
        rotations[name] = [ id_ for id_ in int_list(spell_ids, path) if id_ != 0 ]

    return rotations
