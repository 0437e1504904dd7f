"""Stable display colour per mentor group."""

from data.seating_state import group_number
from config.defaults import GROUP_PALETTE


def group_color(group_id: str) -> str:
    """Colour from the palette by mentor number; first colour for other ids."""
    number = group_number(group_id)
    if number is None:
        return GROUP_PALETTE[0]
    return GROUP_PALETTE[(number - 1) % len(GROUP_PALETTE)]
