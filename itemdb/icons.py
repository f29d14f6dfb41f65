import logging

# Attaches icons for everything the sim UI shows. Only adds entries to the
# icon collections, items and enchants themselves are never touched.
def attach_icons(db, item_tooltips, spell_tooltips,
                 extra_item_ids = (), shared_spell_ids = (),
                 talent_spell_ids = None, rotation_spell_ids = None):
    item_icons = len(db.item_icons)
    spell_icons = len(db.spell_icons)

    for item_id in sorted(db.items.keys()):
        db.add_item_icon(item_id, item_tooltips)

    for enchant in db.enchants.values():
        if enchant.item_id != 0:
            db.add_item_icon(enchant.item_id, item_tooltips)
        if enchant.spell_id != 0:
            db.add_spell_icon(enchant.spell_id, spell_tooltips)

    for item_id in extra_item_ids:
        db.add_item_icon(item_id, item_tooltips)

    for item in db.items.values():
        for spell_id in item.crafted_spell_ids():
            db.add_spell_icon(spell_id, spell_tooltips)

    for spell_id in shared_spell_ids:
        db.add_spell_icon(spell_id, spell_tooltips)

    for spell_ids in (talent_spell_ids or {}).values():
        for spell_id in spell_ids:
            db.add_spell_icon(spell_id, spell_tooltips)

    for spell_ids in (rotation_spell_ids or {}).values():
        for spell_id in spell_ids:
            db.add_spell_icon(spell_id, spell_tooltips)

    logging.info('Attached %d item icons and %d spell icons',
        len(db.item_icons) - item_icons, len(db.spell_icons) - spell_icons)

    return db
