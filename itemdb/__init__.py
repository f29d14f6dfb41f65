import collections

class ItemDBError(Exception):
    pass

# Malformed records or inconsistent configuration data
class ConfigurationError(ItemDBError, ValueError):
    pass

# Missing or unreadable input files
class InputError(ItemDBError):
    pass

ItemSource = collections.namedtuple('ItemSource',
    [ 'kind', 'spell_id', 'zone_id', 'npc_id', 'other_id' ])
ItemSource.__new__.__defaults__ = (0, 0, 0, 0)

GlyphID = collections.namedtuple('GlyphID', [ 'item_id', 'spell_id' ])

# Collections reconciled through the merge engine
MERGE_KINDS = ( 'items', 'gems', 'enchants', 'item_icons', 'spell_icons' )

# Collections keyed by id, merged by replacement
KEYED_KINDS = MERGE_KINDS + ( 'zones', 'npcs' )

# Collections replaced wholesale
LIST_KINDS = ( 'encounters', 'glyph_ids' )
