"""Character sheet resolution: settings card, Class/Race inheritance, value rules."""

from .resolver import CharacterSheetResolver, find_reference  # noqa: F401
from .sections import collapse_blank_lines, read_section, strip_section  # noqa: F401
from .settings_card import build_card_text, parse_card  # noqa: F401
from .values import DISABLED_KEYWORDS, clamp, compose, is_disabled, parse_value  # noqa: F401
