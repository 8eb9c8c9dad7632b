"""
Built-in capsule library.

Every built-in ships a template for all four platforms; web and desktop
share the same React template.
"""

from .button import BUTTON
from .card import CARD
from .image import IMAGE
from .input import INPUT
from .list import LIST
from .modal import MODAL
from .text import TEXT

BUILTIN_CAPSULES = [BUTTON, TEXT, INPUT, CARD, LIST, MODAL, IMAGE]

__all__ = [
    "BUILTIN_CAPSULES",
    "BUTTON",
    "CARD",
    "IMAGE",
    "INPUT",
    "LIST",
    "MODAL",
    "TEXT",
]
