"""Editable static ingredient and pop-up configuration."""

from __future__ import annotations

# Rows are top to bottom, items left to right. Rows may differ in length.
INGREDIENT_GRID_BY_CATEGORY: dict[str, list[list[str]]] = {
    "bread": [
        ["white_bread"],
        ["whole_wheat_bread"],
    ],
    "meat": [
        ["patty", "bacon"],
    ],
    "cheese": [
        ["cheddar", "swiss"],
    ],
    "veggie": [
        ["onion", "mushroom"],
        ["tomato", "lettuce"],
    ],
    "sauce": [
        ["ketchup", "mayo", "mustard"],
    ],
}

# Canonical ingredient metadata values consumed by sandwich_station.data.
INGREDIENT_META_BY_ID: dict[str, dict[str, str | None]] = {
    "white_bread": {"display_name": "White Bread", "asset_key": "sprites/white_bread"},
    "whole_wheat_bread": {"display_name": "Whole Wheat", "asset_key": "sprites/whole_wheat_bread"},
    "patty": {"display_name": "Patty", "asset_key": "sprites/patty"},
    "bacon": {"display_name": "Bacon", "asset_key": "sprites/bacon"},
    "cheddar": {"display_name": "Cheddar", "asset_key": "sprites/cheddar"},
    "swiss": {"display_name": "Swiss", "asset_key": "sprites/swiss"},
    "lettuce": {"display_name": "Lettuce", "asset_key": "sprites/lettuce"},
    "tomato": {"display_name": "Tomato", "asset_key": "sprites/tomato"},
    "onion": {"display_name": "Onion", "asset_key": "sprites/onion"},
    "mushroom": {"display_name": "Mushroom", "asset_key": "sprites/mushroom"},
    "ketchup": {"display_name": "Ketchup", "asset_key": "sprites/ketchup"},
    "mustard": {"display_name": "Mustard", "asset_key": "sprites/mustard"},
    "mayo": {"display_name": "Mayo", "asset_key": "sprites/mayo"},
}

CATEGORY_DISPLAY_NAMES: dict[str, str] = {
    "bread": "Bread",
    "meat": "Meat",
    "cheese": "Cheese",
    "veggie": "Veggie",
    "sauce": "Sauce",
}

# Keyboard stand-ins for the adaptive controller's category buttons.
CATEGORY_KEYS: dict[str, str] = {
    "b": "bread",
    "m": "meat",
    "c": "cheese",
    "v": "veggie",
    "s": "sauce",
}

POPUP_MESSAGES: dict[str, dict[str, str]] = {
    "no_selected_ingredient": {
        "title": "Nothing Selected",
        "body": "Pick an ingredient from a category before pressing the plate.",
    },
    "empty_plate_submit_player": {
        "title": "Empty Plate",
        "body": "You can't eat an empty plate!",
    },
    "empty_plate_submit_customer": {
        "title": "Empty Plate",
        "body": "The customer is waiting for an actual sandwich.",
    },
    "empty_plate_submit_robot": {
        "title": "Empty Plate",
        "body": "The robot scans the plate. No sandwich detected.",
    },
    "customer_speaking": {
        "title": "Hold On",
        "body": "Wait for the customer to finish speaking.",
    },
    "ingredient_limit": {
        "title": "Too Tall",
        "body": "The sandwich can't hold any more ingredients.",
    },
}
