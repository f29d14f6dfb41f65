from itemdb.constants import ItemQuality
from itemdb.data import Item, Gem, IconData

def epic(id_, name, ilvl = 200, **kwargs):
    return Item(id = id_, name = name, ilvl = ilvl, quality = ItemQuality.EPIC, **kwargs)

def gem(id_, name, quality = ItemQuality.RARE, **kwargs):
    return Gem(id = id_, name = name, quality = quality, **kwargs)

def icon(id_, name = 'Icon', icon_name = 'inv_misc_questionmark'):
    return IconData(id = id_, name = name, icon = icon_name)

class FakeTooltip:
    def __init__(self, id_, name, icon):
        self.id = id_
        self.name = name
        self.icon = icon

    def to_icon(self):
        return IconData(id = self.id, name = self.name, icon = self.icon)

def tooltips(*entries):
    return { id_: FakeTooltip(id_, name, icon_) for id_, name, icon_ in entries }
