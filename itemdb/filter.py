import logging

from itemdb import constants
from itemdb.constants import ItemQuality, GemColor, FactionRestriction

def filter_map(data, predicate):
    return { id_: v for id_, v in data.items() if predicate(v) }

def name_denied(name, config):
    for pattern in config.name_deny_regexes:
        if pattern.search(name):
            return True

    return False

# A single named pass over the database. Stages either remove entries or
# attach data to them, and run in the order the pipeline lists them.
class FilterStage:
    name = None

    def apply(self, db):
        raise NotImplementedError

    def __str__(self):
        return self.name

class ItemDenyListFilter(FilterStage):
    name = 'item-deny-list'

    def __init__(self, config):
        self._config = config

    def valid(self, item):
        if item.id in self._config.item_deny_ids:
            return False

        if item.ilvl > self._config.max_ilvl:
            return False

        return not name_denied(item.name, self._config)

    def apply(self, db):
        db.items = filter_map(db.items, self.valid)

# Drops the base version of an item when a marked copy of the same item
# exists, e.g. "Bonescythe Gauntlets" when "Heroes' Bonescythe Gauntlets" is
# present.
class NameVariantFilter(FilterStage):
    def __init__(self, name, marker, prefix = True):
        self.name = name
        self._marker = marker
        self._prefix = prefix

    def marked(self, name):
        if self._prefix:
            return name.startswith(self._marker)
        else:
            return name.endswith(self._marker)

    def marked_name(self, name):
        if self._prefix:
            return self._marker + name
        else:
            return name + self._marker

    def apply(self, db):
        # Marked names are collected before anything is removed
        marked_names = set(item.name for item in db.items.values() if self.marked(item.name))

        db.items = filter_map(db.items,
            lambda item: self.marked_name(item.name) not in marked_names)

# Some set items have an unavailable copy with the same name and item level,
# but a higher item id. Only the lowest id is kept.
class DuplicateSetItemFilter(FilterStage):
    name = 'duplicate-set-items'

    def __init__(self, ilvl):
        self._ilvl = ilvl

    def apply(self, db):
        lowest_ids = {}
        for item in db.items.values():
            if item.set_name == '' or item.ilvl != self._ilvl:
                continue

            if item.name not in lowest_ids or item.id < lowest_ids[item.name]:
                lowest_ids[item.name] = item.id

        db.items = filter_map(db.items, lambda item: not (
            item.ilvl == self._ilvl and item.name in lowest_ids and item.id > lowest_ids[item.name]))

class GemDenyListFilter(FilterStage):
    name = 'gem-deny-list'

    def __init__(self, config):
        self._config = config

    def valid(self, gem):
        if gem.id in self._config.gem_deny_ids:
            return False

        return not name_denied(gem.name, self._config)

    def apply(self, db):
        db.gems = filter_map(db.gems, self.valid)

class GemUniqueFlagFilter(FilterStage):
    name = 'stormjewel-unique'

    def __init__(self, suffix):
        self._suffix = suffix

    def apply(self, db):
        for gem in db.gems.values():
            if gem.name.endswith(self._suffix):
                gem.unique = False

class IconSanityFilter(FilterStage):
    name = 'icon-sanity'

    def apply(self, db):
        db.item_icons = filter_map(db.item_icons, lambda icon: icon.is_valid())
        db.spell_icons = filter_map(db.spell_icons, lambda icon: icon.is_valid())

class FactionAttachment(FilterStage):
    name = 'faction-restrictions'

    def __init__(self, restrictions):
        self._restrictions = restrictions

    def apply(self, db):
        for item in db.items.values():
            item.faction_restriction = self._restrictions.get(item.id, FactionRestriction.UNSPECIFIED)

class SimmableFilter(FilterStage):
    def __init__(self, config, invert = False):
        self._config = config
        self._invert = invert
        self.name = invert and 'non-simmable' or 'simmable'

    def apply(self, db):
        db.items = filter_map(db.items,
            lambda item: simmable_item(item, self._config) != self._invert)

        if not self._invert:
            for item in db.items.values():
                if item.ilvl == 0:
                    logging.warning('Missing ilvl: %s (%d)', item.name, item.id)

        db.gems = filter_map(db.gems,
            lambda gem: simmable_gem(gem, self._config) != self._invert)

class FilterPipeline:
    def __init__(self, stages):
        self.stages = list(stages)

    def names(self):
        return [ stage.name for stage in self.stages ]

    def run(self, db):
        for stage in self.stages:
            before = (len(db.items), len(db.gems), len(db.item_icons) + len(db.spell_icons))

            stage.apply(db)

            after = (len(db.items), len(db.gems), len(db.item_icons) + len(db.spell_icons))
            logging.info('%-22s removed %d items, %d gems, %d icons', stage.name,
                before[0] - after[0], before[1] - after[1], before[2] - after[2])

        return db

# Filters out entities which shouldn't be included anywhere, and attaches
# faction information to what remains.
def global_stages(config, faction_restrictions):
    stages = [ ItemDenyListFilter(config) ]

    for name, marker, prefix in constants.ITEM_VARIANT_MARKERS:
        stages.append(NameVariantFilter(name, marker, prefix))

    stages += [
        DuplicateSetItemFilter(config.duplicate_set_ilvl),
        GemDenyListFilter(config),
        GemUniqueFlagFilter(constants.UNIQUE_FLAG_CLEAR_SUFFIX),
        IconSanityFilter(),
        FactionAttachment(faction_restrictions),
    ]

    return stages

def apply_global_filters(db, config, faction_restrictions):
    return FilterPipeline(global_stages(config, faction_restrictions)).run(db)

# Splits db into (simmable, leftover). db itself becomes the simmable half,
# the leftover half is filtered from a clone taken before any of that.
def partition(db, config):
    leftovers = db.clone()

    FilterPipeline([ SimmableFilter(config, invert = True) ]).run(leftovers)
    FilterPipeline([ SimmableFilter(config) ]).run(db)

    return db, leftovers

def simmable_item(item, config):
    if item.id in config.item_allow_ids:
        return True

    if item.quality < ItemQuality.UNCOMMON:
        return False
    elif item.quality == ItemQuality.ARTIFACT:
        return False
    elif item.quality > ItemQuality.HEIRLOOM:
        return False
    elif item.quality < ItemQuality.EPIC:
        if item.ilvl < 145:
            return False
        if item.ilvl < 149 and item.set_name == '':
            return False
    else:
        # Lower threshold, epic and legendary items from earlier expansions are still used
        if item.quality != ItemQuality.HEIRLOOM and item.ilvl < 140:
            return False

    return True

def simmable_gem(gem, config):
    if gem.id in config.gem_allow_ids:
        return True

    if gem.color == GemColor.META:
        return True

    # Gems from earlier expansions
    if gem.id < config.min_gem_id:
        return False

    return gem.quality >= ItemQuality.UNCOMMON
