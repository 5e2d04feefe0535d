"""Image-generation prompts for card artwork only (no frame, no UI)."""

from typing import Optional


def generate_artwork_prompt(card_name: str, description: str = "") -> str:
    return (
        f"Create a fantasy artwork of {card_name}. {description}. \n"
        "High quality digital painting, fantasy art style, detailed illustration, \n"
        "vibrant colors, magical atmosphere, epic fantasy scene, \n"
        "character portrait or creature art, no card frame, no UI elements, \n"
        "just the pure artwork suitable for a trading card game illustration."
    )


def generate_character_art_prompt(card_name: str, description: str = "") -> str:
    return (
        f"Fantasy character artwork of {card_name}. {description}. \n"
        "Detailed character portrait, epic fantasy style, digital painting, \n"
        "vibrant colors, magical lighting, heroic pose, \n"
        "no background distractions, focus on the character, \n"
        "suitable for trading card game artwork."
    )


def generate_creature_art_prompt(card_name: str, description: str = "") -> str:
    return (
        f"Fantasy creature artwork of {card_name}. {description}. \n"
        "Detailed creature illustration, epic fantasy style, digital art, \n"
        "vibrant colors, dramatic lighting, dynamic pose, \n"
        "fantasy environment background, magical atmosphere, \n"
        "suitable for trading card game creature art."
    )


def generate_spell_art_prompt(card_name: str, description: str = "") -> str:
    return (
        f"Magical spell effect artwork of {card_name}. {description}. \n"
        "Dynamic magical effects, energy swirls, glowing particles, \n"
        "vibrant magical colors, fantasy spell visualization, \n"
        "epic magical scene, dramatic lighting effects, \n"
        "suitable for trading card game spell artwork."
    )


def generate_weapon_art_prompt(card_name: str, description: str = "") -> str:
    return (
        f"Fantasy weapon artwork of {card_name}. {description}. \n"
        "Detailed weapon illustration, masterwork craftsmanship, intricate design, \n"
        "magical enchantments, glowing runes, mystical aura, \n"
        "ornate decorations, legendary weapon, epic fantasy style, \n"
        "vibrant metallic textures, magical lighting effects, \n"
        "no character holding it, focus on the weapon itself, \n"
        "suitable for trading card game weapon artwork."
    )


CARD_TYPES = ("MINION", "SPELL", "WEAPON")

_BY_TYPE = {
    "SPELL": generate_spell_art_prompt,
    "WEAPON": generate_weapon_art_prompt,
    "MINION": generate_creature_art_prompt,
}


def get_prompt_by_type(card_name: str, description: str = "", card_type: Optional[str] = "MINION") -> str:
    """Pick the artwork prompt for a card type; unknown types get creature art."""
    builder = _BY_TYPE.get((card_type or "").upper(), generate_creature_art_prompt)
    return builder(card_name, description)
