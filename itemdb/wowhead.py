import csv, io, json, logging, os, re

from itemdb import InputError, ItemSource, constants
from itemdb.constants import GemColor
from itemdb.data import Item, Gem, IconData
from itemdb.util import read_file

_ILVL_RE     = re.compile(r'Item Level <!--ilvl-->([0-9]+)')
_SLOT_RE     = re.compile(r'<td>(Head|Neck|Shoulder|Back|Chest|Shirt|Tabard|Wrist|Hands|Waist|Legs|Feet|'
                          r'Finger|Trinket|Main Hand|Off Hand|One-Hand|Two-Hand|Held In Off-hand|'
                          r'Ranged|Relic|Thrown)</td>')
_SET_RE      = re.compile(r'<a href="/[a-z]+/item-set=-?[0-9]+[^"]*"[^>]*>([^<]+)</a>')
_UNIQUE_RE   = re.compile(r'>Unique(?:-Equipped)?(?: \([^)]*\))?<')
_HEROIC_RE   = re.compile(r'<span class="q2">Heroic</span>')
_META_RE     = re.compile(r'Only fits in a meta gem slot')
_SOCKET_RE   = re.compile(r'Matches an? ((?:Red|Yellow|Blue|, | or )+) [Ss]ocket')

_SOCKET_COLORS = {
    frozenset([ 'Red' ])                  : GemColor.RED,
    frozenset([ 'Blue' ])                 : GemColor.BLUE,
    frozenset([ 'Yellow' ])               : GemColor.YELLOW,
    frozenset([ 'Red', 'Yellow' ])        : GemColor.ORANGE,
    frozenset([ 'Red', 'Blue' ])          : GemColor.PURPLE,
    frozenset([ 'Blue', 'Yellow' ])       : GemColor.GREEN,
    frozenset([ 'Red', 'Yellow', 'Blue' ]): GemColor.PRISMATIC,
}

# A single tooltip response, item or spell
class Tooltip:
    def __init__(self, id_, data):
        self.id = id_
        self.name = data.get('name', '')
        self.quality = data.get('quality', 0)
        self.icon = data.get('icon', '')
        self.tooltip = data.get('tooltip', '')

    def __search(self, regex):
        mobj = regex.search(self.tooltip)
        return mobj and mobj.group(1) or None

    def ilvl(self):
        value = self.__search(_ILVL_RE)
        return value and int(value) or 0

    def item_type(self):
        return self.__search(_SLOT_RE) or ''

    def set_name(self):
        return self.__search(_SET_RE) or ''

    def is_unique(self):
        return _UNIQUE_RE.search(self.tooltip) is not None

    def is_heroic(self):
        return _HEROIC_RE.search(self.tooltip) is not None

    def gem_color(self):
        if _META_RE.search(self.tooltip):
            return GemColor.META

        mobj = _SOCKET_RE.search(self.tooltip)
        if not mobj:
            return GemColor.UNKNOWN

        colors = frozenset(re.findall('Red|Yellow|Blue', mobj.group(1)))
        return _SOCKET_COLORS.get(colors, GemColor.UNKNOWN)

    def is_equippable(self):
        return self.item_type() != ''

    def is_gem(self):
        return self.gem_color() != GemColor.UNKNOWN

    def to_item(self):
        return Item(
            id       = self.id,
            name     = self.name,
            icon     = self.icon,
            type     = self.item_type(),
            ilvl     = self.ilvl(),
            quality  = self.quality,
            set_name = self.set_name(),
            unique   = self.is_unique(),
            heroic   = self.is_heroic())

    def to_gem(self):
        return Gem(
            id      = self.id,
            name    = self.name,
            icon    = self.icon,
            color   = self.gem_color(),
            quality = self.quality,
            unique  = self.is_unique())

    def to_icon(self):
        return IconData(id = self.id, name = self.name, icon = self.icon)

    def __str__(self):
        return 'Tooltip(id={}, name={})'.format(self.id, self.name)

# Tooltip database, stored as "id,json" csv rows by the scraper
class TooltipManager:
    def __init__(self, path):
        self.path = path

    def parse(self, contents):
        tooltips = {}

        for lineno, row in enumerate(csv.reader(io.StringIO(contents)), start = 1):
            if len(row) == 0:
                continue

            if len(row) != 2:
                raise InputError('{}:{}: expected 2 columns, got {}'.format(
                    self.path, lineno, len(row)))

            try:
                id_ = int(row[0])
                data = json.loads(row[1])
            except ValueError as e:
                raise InputError('{}:{}: {}'.format(self.path, lineno, e))

            # Empty responses for ids that do not exist
            if not data:
                continue

            tooltips[id_] = Tooltip(id_, data)

        return tooltips

    def read(self):
        tooltips = self.parse(read_file(self.path))
        logging.info('Read %d tooltips from %s', len(tooltips), os.path.basename(self.path))
        return tooltips

# Wowhead source type codes
_SOURCE_KINDS = {
    1: constants.SOURCE_CRAFTED,
    2: constants.SOURCE_DROP,
    4: constants.SOURCE_QUEST,
    5: constants.SOURCE_SOLD_BY,
    6: constants.SOURCE_REP,
}

class GearPlannerItem:
    def __init__(self, id_, data):
        self.id = id_
        self.data = data

    def sources(self):
        sources = []
        codes = self.data.get('source', [])
        details = self.data.get('sourcemore', [])

        for idx, code in enumerate(codes):
            kind = _SOURCE_KINDS.get(code)
            if kind is None:
                continue

            more = idx < len(details) and details[idx] or {}
            if kind == constants.SOURCE_CRAFTED:
                source = ItemSource(kind, spell_id = more.get('ti', 0))
            elif kind == constants.SOURCE_DROP:
                source = ItemSource(kind, zone_id = more.get('z', 0), npc_id = more.get('ti', 0))
            else:
                source = ItemSource(kind, other_id = more.get('ti', 0))

            if source not in sources:
                sources.append(source)

        return sources

    def to_item(self):
        return Item(
            id       = self.id,
            name     = self.data.get('name', ''),
            icon     = self.data.get('icon', ''),
            ilvl     = self.data.get('itemLevel', 0),
            quality  = self.data.get('quality', 0),
            heroic   = bool(self.data.get('heroic', False)),
            sources  = self.sources())

_PAGE_DATA_RE = re.compile(r'WH\.setPageData\("wow\.gearPlanner\.[a-z]+\.item",\s*')

def parse_gear_planner_db(contents, source = 'gear planner db'):
    mobj = _PAGE_DATA_RE.search(contents)
    if not mobj:
        raise InputError('No item data found in {}'.format(source))

    try:
        data, _ = json.JSONDecoder().raw_decode(contents, mobj.end())
    except ValueError as e:
        raise InputError('Unable to parse item data in {}: {}'.format(source, e))

    items = {}
    for key, value in data.items():
        try:
            id_ = int(key)
        except ValueError:
            raise InputError('Invalid item id "{}" in {}'.format(key, source))

        items[id_] = GearPlannerItem(id_, value)

    return items

def read_gear_planner_db(path):
    items = parse_gear_planner_db(read_file(path), path)
    logging.info('Read %d gear planner items from %s', len(items), os.path.basename(path))
    return items
