"""Style rules, color allocation and style resolution."""

from browserkit.domain.styling.colors import PALETTE, ColorAllocator, ColorStore
from browserkit.domain.styling.resolver import StyleResolver, StylingCapability
from browserkit.domain.styling.rules import StyleRuleSet

__all__ = [
    "PALETTE",
    "ColorAllocator",
    "ColorStore",
    "StyleResolver",
    "StyleRuleSet",
    "StylingCapability",
]
