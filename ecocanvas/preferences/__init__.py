"""
User sustainability preferences.

The engine never holds preference state: callers pass a UserPreferences
value into every scoring call. The HTTP layer keeps one per session.
"""
from .models import (
    DEFAULT_PREFERENCES,
    ImpactPriority,
    PreferencesUpdate,
    PriceRange,
    SustainabilityFactor,
    UserPreferences,
    merge_preferences,
)

__all__ = [
    "DEFAULT_PREFERENCES",
    "ImpactPriority",
    "PreferencesUpdate",
    "PriceRange",
    "SustainabilityFactor",
    "UserPreferences",
    "merge_preferences",
]
