"""
Editing module - apply and clear formatting on annotated documents.
"""

from discord_ansi.edit.selection import Selection
from discord_ansi.edit.formatting import apply_style, reset_formatting
from discord_ansi.edit.session import FormattingSession

__all__ = ["Selection", "apply_style", "reset_formatting", "FormattingSession"]
