from itemdb import ItemSource
from itemdb.constants import ItemQuality, GemColor, SOURCE_DROP, SOURCE_SOLD_BY
from itemdb.data import Item, Gem, Enchant

# Manual corrections, merged last. Every field given here replaces whatever
# the scraped sources produced, including empty values.

ITEM_OVERRIDES = [
    Item(id = 45703, ilvl = 226),                               # Spark of Hope, tooltip has no item level
    Item(id = 32837, quality = ItemQuality.LEGENDARY,
         set_name = 'The Twin Blades of Azzinoth'),             # Warglaive of Azzinoth (main hand)
    Item(id = 32838, quality = ItemQuality.LEGENDARY,
         set_name = 'The Twin Blades of Azzinoth'),             # Warglaive of Azzinoth (off hand)
    Item(id = 44253, heroic = False),                           # Darkmoon Card: Greatness
    Item(id = 40865, sources = [
        ItemSource(SOURCE_SOLD_BY, other_id = 28314) ]),        # Noble Draenei Trinket
    Item(id = 50348, sources = [
        ItemSource(SOURCE_DROP, zone_id = 4812, npc_id = 36612) ]), # Dislodged Foreign Object
]

GEM_OVERRIDES = [
    Gem(id = 41285, quality = ItemQuality.RARE),                # Chaotic Skyflare Diamond
    Gem(id = 49110, color = GemColor.PRISMATIC, unique = True), # Nightmare Tear
]

ENCHANT_OVERRIDES = [
    # Head
    Enchant(id = 3817, name = 'Arcanum of Torment', item_id = 50367, spell_id = 59954,
            type = 'Head', quality = ItemQuality.EPIC),
    Enchant(id = 3820, name = 'Arcanum of Burning Mysteries', item_id = 50368, spell_id = 59970,
            type = 'Head', quality = ItemQuality.EPIC),
    Enchant(id = 3818, name = 'Arcanum of the Stalwart Protector', item_id = 50369, spell_id = 59955,
            type = 'Head', quality = ItemQuality.EPIC),
    # Weapon
    Enchant(id = 3789, name = 'Berserking', spell_id = 59621,
            type = 'Weapon', quality = ItemQuality.EPIC),
    Enchant(id = 3790, name = 'Black Magic', spell_id = 59625,
            type = 'Weapon', quality = ItemQuality.EPIC),
    Enchant(id = 3368, name = 'Rune of the Fallen Crusader', spell_id = 53344,
            type = 'Weapon', quality = ItemQuality.EPIC),
    # Shoulder
    Enchant(id = 3808, name = 'Greater Inscription of the Axe', item_id = 50335, spell_id = 61117,
            type = 'Shoulder', quality = ItemQuality.EPIC),
]
