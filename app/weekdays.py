"""Weekday names for the week view, indexed by day of week with Sunday=0."""

from types import MappingProxyType

WEEKDAY_NAMES = MappingProxyType(
    {
        "de": (
            "Sonntag",
            "Montag",
            "Dienstag",
            "Mittwoch",
            "Donnerstag",
            "Freitag",
            "Samstag",
        ),
        "en": (
            "Sunday",
            "Monday",
            "Tuesday",
            "Wednesday",
            "Thursday",
            "Friday",
            "Saturday",
        ),
    }
)
