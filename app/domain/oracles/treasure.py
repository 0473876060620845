"""Treasure and item generators."""

from __future__ import annotations

from app.domain.oracles.details import roll_color, roll_property
from app.domain.oracles.tables import face
from app.models.results.treasure import ItemCreationResult, ObjectTreasureResult
from app.modules.dice.roller import RollSource, Skew, parse_skew

TREASURE_CATEGORIES = ["Trinket", "Treasure", "Document", "Accessory", "Weapon", "Armor"]

# category -> three d6 columns
TREASURE_COLUMNS: dict[str, list[list[str]]] = {
    "Trinket": [
        ["Worn", "Carved", "Painted", "Tiny", "Odd", "Lucky"],
        ["wooden", "bone", "glass", "tin", "clay", "stone"],
        ["figurine", "button", "whistle", "dice", "bead", "token"],
    ],
    "Treasure": [
        ["Tarnished", "Polished", "Engraved", "Heavy", "Gleaming", "Flawless"],
        ["copper", "silver", "gold", "jade", "pearl", "gem-set"],
        ["coins", "chalice", "idol", "bracelet", "ingot", "crown"],
    ],
    "Document": [
        ["Torn", "Sealed", "Coded", "Faded", "Signed", "Illuminated"],
        ["paper", "vellum", "parchment", "bark", "silk", "metal"],
        ["letter", "map", "deed", "journal", "contract", "spellbook"],
    ],
    "Accessory": [
        ["Plain", "Fine", "Studded", "Embroidered", "Jeweled", "Enchanted"],
        ["leather", "cloth", "fur", "silver", "gold", "mithral"],
        ["belt", "cloak", "ring", "amulet", "gloves", "circlet"],
    ],
    "Weapon": [
        ["Rusty", "Sturdy", "Balanced", "Serrated", "Masterwork", "Legendary"],
        ["iron", "steel", "bronze", "obsidian", "silvered", "runed"],
        ["dagger", "sword", "axe", "mace", "spear", "bow"],
    ],
    "Armor": [
        ["Dented", "Patched", "Reinforced", "Ornate", "Masterwork", "Legendary"],
        ["leather", "hide", "chain", "scale", "plate", "dragonscale"],
        ["cap", "shield", "vest", "gauntlets", "helm", "cuirass"],
    ],
}


def generate_object(source: RollSource, skew: Skew | str = Skew.NONE) -> ObjectTreasureResult:
    """4d6, each die skewed alike; the first die picks the category."""
    skew = parse_skew(skew)
    rolls: list[int] = []
    kept: list[int] = []
    for _ in range(4):
        chosen, faces = source.roll_skewed(6, skew)
        kept.append(chosen)
        rolls.extend(faces)

    treasure_category = face(TREASURE_CATEGORIES, kept[0])
    columns = [face(column, roll) for column, roll in zip(TREASURE_COLUMNS[treasure_category], kept[1:])]
    return ObjectTreasureResult(
        rolls=rolls, kept_rolls=kept, skew=skew, treasure_category=treasure_category, columns=columns
    )


def generate_full_item(
    source: RollSource,
    skew: Skew | str = Skew.NONE,
    include_color: bool = False,
) -> ItemCreationResult:
    return ItemCreationResult(
        base_item=generate_object(source, skew),
        first_property=roll_property(source),
        second_property=roll_property(source),
        color=roll_color(source) if include_color else None,
    )
