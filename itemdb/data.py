from itemdb import ItemSource, ConfigurationError
from itemdb.constants import ItemQuality, GemColor, FactionRestriction, SOURCE_CRAFTED, SOURCE_KINDS

def is_unset(value):
    if value is None:
        return True

    # Also covers False and zero valued enum members
    if isinstance(value, (int, float)) and value == 0:
        return True

    if isinstance(value, (str, list, tuple)) and len(value) == 0:
        return True

    return False

def enum_value(enum_class, value):
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError('Invalid {} value {!r}'.format(enum_class.__name__, value))

    try:
        return enum_class(number)
    # Out of range values are kept as plain integers, filters reject them
    except ValueError:
        return number

def source_value(value):
    if isinstance(value, ItemSource):
        source = value
    elif isinstance(value, dict):
        source = ItemSource(**value)
    elif isinstance(value, (list, tuple)):
        source = ItemSource(*value)
    else:
        source = None

    if source is not None and source.kind in SOURCE_KINDS:
        return source

    raise ConfigurationError('Invalid item source "{}"'.format(value))

class Record:
    # (name, default) for each field, in output order
    _fields = ( ( 'id', 0 ), )

    # List valued fields, accumulated on merge
    _collections = { }

    # Enum typed fields
    _enums = { }

    def __init__(self, **kwargs):
        names = self.field_names()
        for name in kwargs:
            if name not in names:
                raise ConfigurationError('Unknown field "{}" for {}'.format(
                    name, self.__class__.__name__))

        for name, default in self._fields:
            setattr(self, name, self.__coerce(name, kwargs.get(name, default)))

        # Fields given explicitly, manual overrides replace exactly these
        self._specified = frozenset(kwargs.keys())

    @classmethod
    def field_names(cls):
        return [ name for name, _ in cls._fields ]

    @classmethod
    def from_dict(cls, data):
        return cls(**data)

    def __coerce(self, name, value):
        if name in self._collections:
            values = []
            for v in value or []:
                v = self._collections[name](v)
                if v not in values:
                    values.append(v)
            return values
        elif name in self._enums:
            return enum_value(self._enums[name], value or 0)

        return value

    def specified(self):
        return self._specified

    def merge(self, other, override = False):
        if other.__class__ != self.__class__:
            raise ConfigurationError('Cannot merge {} into {}'.format(
                other.__class__.__name__, self.__class__.__name__))

        for name in self.field_names():
            incoming = getattr(other, name)
            if override:
                if name not in other.specified():
                    continue

                if name in self._collections:
                    incoming = self.__coerce(name, incoming)

                setattr(self, name, incoming)
            elif name in self._collections:
                current = getattr(self, name)
                for value in incoming:
                    if value not in current:
                        current.append(value)
            elif not is_unset(incoming):
                setattr(self, name, incoming)

        self._specified = self._specified | other.specified()

        return self

    def to_dict(self):
        data = {}
        for name in self.field_names():
            value = getattr(self, name)
            if is_unset(value):
                continue

            if name in self._collections:
                data[name] = [ { k: f for k, f in v._asdict().items() if f } for v in value ]
            elif name in self._enums:
                data[name] = int(value)
            else:
                data[name] = value

        return data

    def __eq__(self, other):
        if other.__class__ != self.__class__:
            return NotImplemented

        return all(getattr(self, n) == getattr(other, n) for n in self.field_names())

    def __repr__(self):
        fields = [ '{}={!r}'.format(n, v) for n, v in self.to_dict().items() ]
        return '{}({})'.format(self.__class__.__name__, ', '.join(fields))

class Item(Record):
    _fields = (
        ( 'id',                  0 ),
        ( 'name',                '' ),
        ( 'icon',                '' ),
        ( 'type',                '' ),
        ( 'ilvl',                0 ),
        ( 'quality',             ItemQuality.POOR ),
        ( 'set_name',            '' ),
        ( 'unique',              False ),
        ( 'heroic',              False ),
        ( 'faction_restriction', FactionRestriction.UNSPECIFIED ),
        ( 'sources',             () ),
    )

    _collections = { 'sources': source_value }

    _enums = {
        'quality'            : ItemQuality,
        'faction_restriction': FactionRestriction,
    }

    def crafted_spell_ids(self):
        return [ s.spell_id for s in self.sources if s.kind == SOURCE_CRAFTED and s.spell_id ]

class Gem(Record):
    _fields = (
        ( 'id',      0 ),
        ( 'name',    '' ),
        ( 'icon',    '' ),
        ( 'color',   GemColor.UNKNOWN ),
        ( 'quality', ItemQuality.POOR ),
        ( 'unique',  False ),
    )

    _enums = {
        'color'  : GemColor,
        'quality': ItemQuality,
    }

# Keyed by the enchant effect id. At most one of item_id and spell_id applies
# the enchant, the other one is only used to look up an icon.
class Enchant(Record):
    _fields = (
        ( 'id',       0 ),
        ( 'name',     '' ),
        ( 'item_id',  0 ),
        ( 'spell_id', 0 ),
        ( 'type',     '' ),
        ( 'quality',  ItemQuality.POOR ),
    )

    _enums = { 'quality': ItemQuality }

class IconData(Record):
    _fields = (
        ( 'id',   0 ),
        ( 'name', '' ),
        ( 'icon', '' ),
    )

    def is_valid(self):
        return self.name != '' and self.icon != ''

class Zone(Record):
    _fields = (
        ( 'id',        0 ),
        ( 'name',      '' ),
        ( 'expansion', 0 ),
    )

class Npc(Record):
    _fields = (
        ( 'id',      0 ),
        ( 'name',    '' ),
        ( 'zone_id', 0 ),
    )

RECORD_CLASSES = {
    'items'      : Item,
    'gems'       : Gem,
    'enchants'   : Enchant,
    'item_icons' : IconData,
    'spell_icons': IconData,
    'zones'      : Zone,
    'npcs'       : Npc,
}
