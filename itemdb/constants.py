import re, enum

class ItemQuality(enum.IntEnum):
  POOR      = 0
  COMMON    = 1
  UNCOMMON  = 2
  RARE      = 3
  EPIC      = 4
  LEGENDARY = 5
  ARTIFACT  = 6
  HEIRLOOM  = 7

class GemColor(enum.IntEnum):
  UNKNOWN   = 0
  META      = 1
  RED       = 2
  BLUE      = 3
  YELLOW    = 4
  GREEN     = 5
  ORANGE    = 6
  PURPLE    = 7
  PRISMATIC = 8

class FactionRestriction(enum.IntEnum):
  UNSPECIFIED   = 0
  ALLIANCE_ONLY = 1
  HORDE_ONLY    = 2

# Item source kinds
SOURCE_CRAFTED = 'crafted'
SOURCE_DROP    = 'drop'
SOURCE_QUEST   = 'quest'
SOURCE_SOLD_BY = 'sold_by'
SOURCE_REP     = 'rep'

SOURCE_KINDS = ( SOURCE_CRAFTED, SOURCE_DROP, SOURCE_QUEST, SOURCE_SOLD_BY, SOURCE_REP )

# Anything above this item level is not obtainable in game
MAX_ITEM_LEVEL = 416

# Every tier 10 set has an unavailable 251 copy with a higher item id
DUPLICATE_SET_ITEM_LEVEL = 251

# Gems below this id are from previous expansions
MIN_GEM_ID = 39900

# Name markers of unavailable duplicate tier pieces, (marker, is_prefix)
ITEM_VARIANT_MARKERS = [
  ( 'heroes-variants',   "Heroes' ",    True  ), # Naxxramas 10 tier 7
  ( 'valorous-variants', 'Valorous ',   True  ), # Ulduar tier 8
  ( 'triumph-variants',  ' of Triumph', False ), # Trial of the Crusader tier 9
]

# Stormjewels are flagged unique in the client data, but are not
UNIQUE_FLAG_CLEAR_SUFFIX = 'Stormjewel'

ITEM_DENY_LIST = [
    17782,                                      # Talisman of Binding Shard
    17783,                                      # Talisman of Binding Fragment
    17802,                                      # Thunderfury, deprecated version
    18582, 18583, 18584,                        # Twin Blades of Azzinoth, unused copies
    24265,                                      # Unused Netherwhelp's Collar
    32384,                                      # Unused Jessera of Mana Spring
    32421,                                      # Unused Frostscythe of Lord Ahune
    32422,                                      # Unused Shadowtooth Dagger
    33482,                                      # Cobra Shaft of Invisibility test copy
    34576, 34577, 34578, 34579, 34580,          # Battlemaster trinkets, unavailable copies
    38289,                                      # Coren's Lucky Coin, duplicate
    39342, 39343,                               # Unused Naxxramas items
    43727, 43728, 43729, 43730, 43731,          # Unavailable Naxxramas tier copies
    44073, 44074,                               # Unused frenzyheart/oracle trinkets
    45000, 45001,                               # Unused Ulduar vendor copies
    50092, 50093,                               # Unavailable Icecrown 5 man copies
]

GEM_DENY_LIST = [
    22459,                                      # Void Sphere
    22460,                                      # Prismatic Sphere
    25091, 25093, 25094, 25095,                 # Unused Burning Crusade cut gems
    32735,                                      # Radiant Spencerite
    33132, 33133, 33134, 33135, 33137,          # Unused Zul'Aman gems
    34142, 34143,                               # Infinite Sphere, Sunwell copies
    35489, 38545, 38546, 38547, 38548, 38549, 38550, # Test gems
    42702,                                      # Enchanted Tear
]

ITEM_ALLOW_LIST = [
    11815,                                      # Hand of Justice
    12590,                                      # Felstriker
    15808,                                      # Fine Light Crossbow
    19019,                                      # Thunderfury, Blessed Blade of the Windseeker
    22399,                                      # Idol of Health
    23198,                                      # Idol of Brutality
    28041,                                      # Bladefist's Breadth
    31193,                                      # Blade of Unquenched Thirst
    32837, 32838,                               # Warglaives of Azzinoth
    38632, 38633,                               # Greatsword of the Ebon Blade, Rune of Razorice
    40865,                                      # Noble Draenei Trinket
    45703,                                      # Spark of Hope
]

GEM_ALLOW_LIST = [
    36766, 36767,                               # Bright and Solid Dragon's Eye
]

# Shared between items and gems
NAME_DENY_LIST = [
    '30 Epic',
    r'\(PH\)',
    'Bracer 1', 'Bracer 2', 'Bracer 3',
    'Boots 1', 'Boots 2', 'Boots 3',
    '^Deprecated',
    'DEPRECATED',
    'Indalamar',
    '^Monster -',
    '^NEW',
    '^PVP',
    'QR XXXX',
    '^Test',
    'TEST',
    '^zOLD',
    '^zzOLD',
]

NAME_DENY_REGEXES = [ re.compile(pattern) for pattern in NAME_DENY_LIST ]

# Item icons to always fetch, referenced directly from the sim UI
EXTRA_ITEM_ICONS = [
    # Pet foods
    33874, 43005,
    # Demonic Rune, Dark Rune
    12662, 20520,
    # Potions
    33447, 33448, 40093, 40211, 40212, 40536, 41166, 42545,
    # Flasks
    46376, 46377, 46378, 46379,
    # Drums
    49633, 49634,
    # Engineering explosives
    40771, 41119,
]

# Spell icons to always fetch, mostly raid buffs and debuffs
SHARED_SPELL_ICONS = [
    # Buffs
    48469, 17051,           # Mark of the Wild, Improved Mark
    25898, 20911,           # Blessing of Kings, Sanctuary
    48934, 20045,           # Greater Blessing of Might, Improved Might
    48938, 20245,           # Greater Blessing of Wisdom, Improved Wisdom
    48162,                  # Prayer of Fortitude
    57623,                  # Horn of Winter
    58643, 52456,           # Strength of Earth, Enhancing Totems
    47440,                  # Commanding Shout
    2825,                   # Bloodlust
    10060,                  # Power Infusion
    29166,                  # Innervate
    57330, 53138,           # Abomination's Might
    # Debuffs
    47467,                  # Sunder Armor
    770,                    # Faerie Fire
    33876, 48564,           # Mangle
    47502,                  # Thunder Clap
    26016,                  # Vindication
    47865,                  # Curse of the Elements
    12579,                  # Winter's Chill
    17800,                  # Shadow Mastery
]

# Talent tree files, relative to the talent input directory
TALENT_TREE_FILES = [
    'deathknight.json',
    'druid.json',
    'hunter.json',
    'hunter_cunning.json',
    'hunter_ferocity.json',
    'hunter_tenacity.json',
    'mage.json',
    'paladin.json',
    'priest.json',
    'rogue.json',
    'shaman.json',
    'warlock.json',
    'warrior.json',
]
