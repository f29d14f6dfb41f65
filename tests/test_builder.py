import csv, io, json, types

import pytest

import gen_db

from itemdb import InputError
from itemdb.builder import read_inputs, build_database
from itemdb.config import Config
from itemdb.constants import FactionRestriction, TALENT_TREE_FILES
from itemdb.data import Enchant
from itemdb.db import WowDatabase

def tooltip(name, quality, icon, html):
    return { 'name': name, 'quality': quality, 'icon': icon, 'tooltip': html }

def equippable(slot, ilvl):
    return '<table><tr><td>{}</td></tr></table>Item Level <!--ilvl-->{}'.format(slot, ilvl)

def socket(colors):
    return '<span class="q1">Matches a {} Socket.</span>'.format(colors)

ITEM_TOOLTIPS = {
    51159: tooltip('Sanctified Bloodmage Gloves', 4, 'inv_gauntlets_83', equippable('Hands', 277)),
    51160: tooltip('Bloodmage Gloves', 4, 'inv_gauntlets_83', equippable('Hands', 277)),
    51161: tooltip('Heroes\' Bloodmage Gloves', 4, 'inv_gauntlets_84', equippable('Hands', 277)),
    37000: tooltip('Green Boots', 2, 'inv_boots_01', equippable('Feet', 100)),
    37001: tooltip('Unlisted Boots', 4, 'inv_boots_02', equippable('Feet', 200)),
    40037: tooltip('Inscribed Ametrine', 3, 'inv_jewelcrafting_gem_39', socket('Red or Yellow')),
    25000: tooltip('Old Ruby', 3, 'inv_jewelcrafting_gem_01', socket('Red')),
    50367: tooltip('Arcanum of Torment', 3, 'ability_warrior_rampage', ''),
}

SPELL_TOOLTIPS = {
    59954: tooltip('Torment', 1, 'spell_shadow_torment', ''),
    56006: tooltip('Tailoring', 1, 'trade_tailoring', ''),
    16814: tooltip('Starlight Wrath', 1, 'spell_nature_abolishmagic', ''),
    16815: tooltip('Starlight Wrath', 1, '', ''),
    48572: tooltip('Shred', 1, 'spell_shadow_vampiricaura', ''),
}

GEAR_PLANNER = {
    '51159': { 'name': 'Sanctified Bloodmage Gloves', 'quality': 4, 'itemLevel': 277 },
    '51160': { 'name': 'Bloodmage Gloves', 'quality': 4, 'itemLevel': 277 },
    '51161': { 'name': 'Heroes\' Bloodmage Gloves', 'quality': 4, 'itemLevel': 277 },
    '37000': { 'name': 'Green Boots', 'quality': 2, 'itemLevel': 100,
               'source': [ 1 ], 'sourcemore': [ { 'ti': 56006 } ] },
    '99999': { 'name': 'Planner Only', 'quality': 4, 'itemLevel': 300 },
}

LOOT_DB = {
    'items': [
        { 'id': 51159, 'sources': [ { 'kind': 'drop', 'zone_id': 4812, 'npc_id': 36597 } ] },
        { 'id': 88888, 'name': 'Loot Only' },
    ],
    'zones': [ { 'id': 4812, 'name': 'Icecrown Citadel', 'expansion': 2 } ],
    'npcs': [ { 'id': 36597, 'name': 'The Lich King', 'zone_id': 4812 } ],
}

def write_tooltips(path, tooltips):
    out = io.StringIO()
    writer = csv.writer(out)
    for id_, data in sorted(tooltips.items()):
        writer.writerow([ id_, json.dumps(data) ])
    path.write_text(out.getvalue())

@pytest.fixture
def inputs_dir(tmp_path):
    inputs = tmp_path / 'db_inputs'
    talents = tmp_path / 'talents'
    inputs.mkdir()
    talents.mkdir()

    write_tooltips(inputs / 'wowhead_item_tooltips.csv', ITEM_TOOLTIPS)
    write_tooltips(inputs / 'wowhead_spell_tooltips.csv', SPELL_TOOLTIPS)
    (inputs / 'wowhead_gearplannerdb.txt').write_text(
        'WH.setPageData("wow.gearPlanner.wotlk.item", {});'.format(json.dumps(GEAR_PLANNER)))
    (inputs / 'atlasloot_db.json').write_text(json.dumps(LOOT_DB))
    (inputs / 'wago_db2_items.csv').write_text('ID,Flags_0,Flags_1\n51159,0,1\n37000,0,0\n')
    (inputs / 'glyph_id_map.json').write_text('[{"itemId": 40896, "spellId": 54810}]')
    (inputs / 'encounters.json').write_text('[{"path": "Default/Raid", "targets": []}]')
    (inputs / 'rotation_spell_ids.json').write_text('{"feral": [48572]}')

    for file_name in TALENT_TREE_FILES:
        (talents / file_name).write_text('[]')
    (talents / 'druid.json').write_text(json.dumps([ { 'name': 'Balance', 'talents': [
        { 'fieldName': 'starlight_wrath', 'spellIds': [ 16814 ], 'maxPoints': 2 } ] } ]))

    return tmp_path

def options(base, **kwargs):
    values = {
        'inputs' : str(base / 'db_inputs'),
        'output' : str(base / 'database'),
        'talents': str(base / 'talents'),
        'config' : None,
    }
    values.update(kwargs)
    return types.SimpleNamespace(**values)

@pytest.fixture
def config(inputs_dir):
    cfg = Config(options(inputs_dir))
    assert cfg.open()
    return cfg

def build(config, **kwargs):
    args = {
        'item_overrides': [],
        'gem_overrides': [],
        'enchant_overrides': [ Enchant(id = 3817, name = 'Arcanum of Torment',
                                       item_id = 50367, spell_id = 59954) ],
        'extra_item_icons': [],
        'shared_spell_icons': [],
    }
    args.update(kwargs)
    return build_database(read_inputs(config), config.filter_config(), **args)

def test_build_partitions_merged_sources(config):
    db, leftovers = build(config)

    # 37001 is not in the gear planner db, 99999 and 88888 have no tooltip,
    # 51160 is the base name of a "Heroes'" copy
    assert sorted(db.items) == [ 51159, 51161 ]
    assert sorted(leftovers.items) == [ 37000 ]
    assert sorted(db.gems) == [ 40037 ]
    assert sorted(leftovers.gems) == [ 25000 ]

    gloves = db.items[51159]
    assert gloves.ilvl == 277
    assert gloves.faction_restriction == FactionRestriction.HORDE_ONLY
    assert [ s.kind for s in gloves.sources ] == [ 'drop' ]

    boots = leftovers.items[37000]
    assert boots.crafted_spell_ids() == [ 56006 ]

def test_build_attaches_icons_to_simmable_half(config):
    db, leftovers = build(config)

    assert sorted(db.item_icons) == [ 50367, 51159, 51161 ]
    # 16815 has no icon, crafted spell 56006 belongs to a leftover item
    assert sorted(db.spell_icons) == [ 16814, 48572, 59954 ]

    assert leftovers.item_icons == {}
    assert leftovers.spell_icons == {}

    for icon in list(db.item_icons.values()) + list(db.spell_icons.values()):
        assert icon.name != '' and icon.icon != ''

def test_build_pass_through_collections(config):
    db, leftovers = build(config)

    assert db.zones[4812].name == 'Icecrown Citadel'
    assert db.npcs[36597].zone_id == 4812
    assert leftovers.zones == {}

    for half in (db, leftovers):
        assert half.glyph_ids[0].spell_id == 54810
        assert half.encounters[0]['path'] == 'Default/Raid'
        assert sorted(half.enchants) == [ 3817 ]

def test_extra_deny_ids_from_config_file(inputs_dir):
    ini = inputs_dir / 'gen_db.ini'
    ini.write_text('[items]\ndeny = 51159\n\n[gems]\nallow = 25000\n')

    cfg = Config(options(inputs_dir, config = str(ini)))
    assert cfg.open()

    db, leftovers = build(cfg)

    assert 51159 not in db.items and 51159 not in leftovers.items
    assert sorted(db.gems) == [ 25000, 40037 ]

def test_missing_input_file_aborts(config, inputs_dir):
    (inputs_dir / 'db_inputs' / 'glyph_id_map.json').unlink()

    with pytest.raises(InputError, match = 'glyph_id_map.json'):
        read_inputs(config)

def test_command_line(inputs_dir):
    output = inputs_dir / 'database'

    assert gen_db.main([ '-i', str(inputs_dir / 'db_inputs'), '-o', str(output),
                         '-t', str(inputs_dir / 'talents') ]) == 0

    db = WowDatabase.from_json((output / 'db.json').read_text())
    leftovers = WowDatabase.from_json((output / 'leftover_db.json').read_text())

    assert 51159 in db.items
    assert 37000 in leftovers.items
    assert set(db.items).isdisjoint(leftovers.items)

def test_command_line_failure(inputs_dir):
    (inputs_dir / 'db_inputs' / 'wago_db2_items.csv').unlink()

    assert gen_db.main([ '-i', str(inputs_dir / 'db_inputs'), '-o', str(inputs_dir / 'database'),
                         '-t', str(inputs_dir / 'talents') ]) == 1
