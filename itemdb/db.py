import copy, json, logging

from itemdb import ConfigurationError, InputError, GlyphID, MERGE_KINDS, KEYED_KINDS, LIST_KINDS
from itemdb.data import RECORD_CLASSES

# Aggregate of all collections that end up in a generated database. Keyed
# collections map an entity id to its record.
class WowDatabase:
    def __init__(self):
        self.items = {}
        self.gems = {}
        self.enchants = {}
        self.item_icons = {}
        self.spell_icons = {}
        self.zones = {}
        self.npcs = {}

        self.encounters = []
        self.glyph_ids = []

    def collection(self, kind):
        if kind not in KEYED_KINDS and kind not in LIST_KINDS:
            raise ConfigurationError('Unknown collection "{}"'.format(kind))

        return getattr(self, kind)

    def __record_id(self, kind, record):
        if not isinstance(record, RECORD_CLASSES[kind]):
            raise ConfigurationError('Cannot store {} in "{}"'.format(
                record.__class__.__name__, kind))

        id_ = getattr(record, 'id', None)
        # bool is an int subclass, but never a valid key
        if not isinstance(id_, int) or isinstance(id_, bool) or id_ <= 0:
            raise ConfigurationError('Invalid id {!r} for {} record {!r}'.format(
                id_, kind, record))

        return id_

    def merge(self, kind, record, override = False):
        if kind not in MERGE_KINDS:
            raise ConfigurationError('Collection "{}" does not support merging'.format(kind))

        id_ = self.__record_id(kind, record)
        collection = self.collection(kind)

        existing = collection.get(id_)
        if existing is None:
            collection[id_] = copy.deepcopy(record)
        else:
            existing.merge(record, override)

        return collection[id_]

    def merge_item(self, item, override = False):
        return self.merge('items', item, override)

    def merge_items(self, items, override = False):
        for item in items:
            self.merge_item(item, override)

    def merge_gem(self, gem, override = False):
        return self.merge('gems', gem, override)

    def merge_gems(self, gems, override = False):
        for gem in gems:
            self.merge_gem(gem, override)

    def merge_enchant(self, enchant, override = False):
        return self.merge('enchants', enchant, override)

    def merge_enchants(self, enchants, override = False):
        for enchant in enchants:
            self.merge_enchant(enchant, override)

    def merge_zones(self, zones):
        self.replace_collection('zones', zones)

    def merge_npcs(self, npcs):
        self.replace_collection('npcs', npcs)

    # Keyed pass-through collections replace per id, list collections replace
    # the whole list
    def replace_collection(self, kind, records):
        if kind in LIST_KINDS:
            setattr(self, kind, copy.deepcopy(list(records)))
            return

        if kind not in KEYED_KINDS:
            raise ConfigurationError('Unknown collection "{}"'.format(kind))

        collection = self.collection(kind)
        for record in records:
            collection[self.__record_id(kind, record)] = copy.deepcopy(record)

    def add_item_icon(self, item_id, tooltips):
        return self.__add_icon(self.item_icons, item_id, tooltips)

    def add_spell_icon(self, spell_id, tooltips):
        return self.__add_icon(self.spell_icons, spell_id, tooltips)

    def __add_icon(self, icons, id_, tooltips):
        tooltip = tooltips.get(id_)
        if tooltip is None:
            return False

        icon = tooltip.to_icon()
        if not icon.is_valid():
            logging.debug('Skipping incomplete icon for id %d: %r', id_, icon)
            return False

        icons[id_] = icon
        return True

    # Independent deep copy, mutating either copy never affects the other
    def clone(self):
        return copy.deepcopy(self)

    def to_dict(self):
        data = {}
        for kind in KEYED_KINDS:
            data[kind] = [ v.to_dict() for _, v in sorted(self.collection(kind).items()) ]

        data['encounters'] = self.encounters
        data['glyph_ids'] = [ { 'itemId': g.item_id, 'spellId': g.spell_id } for g in self.glyph_ids ]

        return data

    @classmethod
    def from_dict(cls, data):
        db = cls()

        for kind in KEYED_KINDS:
            record_class = RECORD_CLASSES[kind]
            db.replace_collection(kind, [ record_class.from_dict(v) for v in data.get(kind, []) ])

        db.encounters = list(data.get('encounters', []))
        db.glyph_ids = [ GlyphID(g['itemId'], g['spellId']) for g in data.get('glyph_ids', []) ]

        return db

    @classmethod
    def from_json(cls, contents, source = '<string>'):
        try:
            data = json.loads(contents)
        except ValueError as e:
            raise InputError('Unable to parse database json in {}: {}'.format(source, e))

        try:
            return cls.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise InputError('Malformed database json in {}: {}'.format(source, e))

    def __str__(self):
        return 'WowDatabase(items={}, gems={}, enchants={}, item_icons={}, spell_icons={}, zones={}, npcs={})'.format(
            len(self.items), len(self.gems), len(self.enchants), len(self.item_icons),
            len(self.spell_icons), len(self.zones), len(self.npcs))
