from .card_prompts import build_card_messages, get_card_prompt, get_supported_languages
from .image_prompts import (
    CARD_TYPES,
    generate_artwork_prompt,
    generate_character_art_prompt,
    generate_creature_art_prompt,
    generate_spell_art_prompt,
    generate_weapon_art_prompt,
    get_prompt_by_type,
)

__all__ = [
    "build_card_messages",
    "get_card_prompt",
    "get_supported_languages",
    "CARD_TYPES",
    "generate_artwork_prompt",
    "generate_character_art_prompt",
    "generate_creature_art_prompt",
    "generate_spell_art_prompt",
    "generate_weapon_art_prompt",
    "get_prompt_by_type",
]
