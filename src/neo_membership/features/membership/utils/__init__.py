"""Membership utilities."""

from .persona import PersonaColor, get_initials, get_persona_color

__all__ = ["PersonaColor", "get_initials", "get_persona_color"]
