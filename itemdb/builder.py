import collections, logging

from itemdb import constants, overrides
from itemdb.db import WowDatabase
from itemdb.filter import apply_global_filters, partition
from itemdb.generator import write_database
from itemdb.icons import attach_icons
from itemdb.presets import read_encounters, read_glyph_ids
from itemdb.talents import read_all_talent_spell_ids, read_rotation_spell_ids
from itemdb.util import read_file
from itemdb.wago import read_faction_restrictions
from itemdb.wowhead import TooltipManager, read_gear_planner_db

ITEM_TOOLTIPS_FILE  = 'wowhead_item_tooltips.csv'
SPELL_TOOLTIPS_FILE = 'wowhead_spell_tooltips.csv'
GEAR_PLANNER_FILE   = 'wowhead_gearplannerdb.txt'
LOOT_DB_FILE        = 'atlasloot_db.json'
ITEM_SPARSE_FILE    = 'wago_db2_items.csv'
GLYPH_IDS_FILE      = 'glyph_id_map.json'
ENCOUNTERS_FILE     = 'encounters.json'
ROTATIONS_FILE      = 'rotation_spell_ids.json'

DB_FILE             = 'db.json'
LEFTOVER_DB_FILE    = 'leftover_db.json'

# Fully read inputs, nothing is read from disk after these are built
BuildInputs = collections.namedtuple('BuildInputs', [
    'item_tooltips', 'spell_tooltips', 'gear_planner_items', 'loot_db',
    'faction_restrictions', 'encounters', 'glyph_ids',
    'talent_spell_ids', 'rotation_spell_ids',
])

def read_inputs(config):
    return BuildInputs(
        item_tooltips        = TooltipManager(config.input_file(ITEM_TOOLTIPS_FILE)).read(),
        spell_tooltips       = TooltipManager(config.input_file(SPELL_TOOLTIPS_FILE)).read(),
        gear_planner_items   = read_gear_planner_db(config.input_file(GEAR_PLANNER_FILE)),
        loot_db              = WowDatabase.from_json(read_file(config.input_file(LOOT_DB_FILE)),
                                                     config.input_file(LOOT_DB_FILE)),
        faction_restrictions = read_faction_restrictions(config.input_file(ITEM_SPARSE_FILE)),
        encounters           = read_encounters(config.input_file(ENCOUNTERS_FILE)),
        glyph_ids            = read_glyph_ids(config.input_file(GLYPH_IDS_FILE)),
        talent_spell_ids     = read_all_talent_spell_ids(config.talent_base),
        rotation_spell_ids   = read_rotation_spell_ids(config.input_file(ROTATIONS_FILE)))

def merge_sources(inputs):
    db = WowDatabase()
    db.replace_collection('encounters', inputs.encounters)
    db.replace_collection('glyph_ids', inputs.glyph_ids)

    for id_, tooltip in sorted(inputs.item_tooltips.items()):
        if tooltip.is_equippable():
            # Items missing from the gear planner db are not available in game
            if id_ in inputs.gear_planner_items:
                db.merge_item(tooltip.to_item())
        elif tooltip.is_gem():
            db.merge_gem(tooltip.to_gem())

    for id_, planner_item in sorted(inputs.gear_planner_items.items()):
        if id_ in db.items:
            db.merge_item(planner_item.to_item())

    for id_, item in sorted(inputs.loot_db.items.items()):
        if id_ in db.items:
            db.merge_item(item)

    logging.info('Merged sources: %s', db)
    return db

def build_database(inputs, filter_config,
                   item_overrides = overrides.ITEM_OVERRIDES,
                   gem_overrides = overrides.GEM_OVERRIDES,
                   enchant_overrides = overrides.ENCHANT_OVERRIDES,
                   extra_item_icons = constants.EXTRA_ITEM_ICONS,
                   shared_spell_icons = constants.SHARED_SPELL_ICONS):
    db = merge_sources(inputs)

    db.merge_items(item_overrides, override = True)
    db.merge_gems(gem_overrides, override = True)
    db.merge_enchants(enchant_overrides, override = True)

    apply_global_filters(db, filter_config, inputs.faction_restrictions)

    db, leftovers = partition(db, filter_config)

    attach_icons(db, inputs.item_tooltips, inputs.spell_tooltips,
        extra_item_ids = extra_item_icons,
        shared_spell_ids = shared_spell_icons,
        talent_spell_ids = inputs.talent_spell_ids,
        rotation_spell_ids = inputs.rotation_spell_ids)

    db.merge_zones(inputs.loot_db.zones.values())
    db.merge_npcs(inputs.loot_db.npcs.values())

    return db, leftovers

class DatabaseBuilder:
    def __init__(self, config):
        self.config = config

    def run(self):
        logging.info('Reading inputs from %s ...', self.config.input_base)
        inputs = read_inputs(self.config)

        db, leftovers = build_database(inputs, self.config.filter_config())

        write_database(leftovers, self.config.output_file(LEFTOVER_DB_FILE))
        write_database(db, self.config.output_file(DB_FILE))

        return db, leftovers
