"""
Unit and formatting helpers shared by the response transformers.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from weather_proxy.definitions.data_sources import ICON_URL_TEMPLATE, Number


def round_temperature(value: Optional[Number]) -> Optional[int]:
    """
    Round a Celsius reading to the nearest integer, halves away from zero.

    Unlike ``round()``, halves never go to even: ``15.5 -> 16``, ``16.5 -> 17``
    and ``-15.5 -> -16``.
    """
    if value is None:
        return None
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def meters_to_km(value: Optional[Number]) -> Optional[Number]:
    """Convert meters to kilometers, keeping whole results as ``int``."""
    if value is None:
        return None
    km = value / 1000
    return int(km) if km.is_integer() else km


def build_icon_url(base_url: str, icon: str) -> str:
    return ICON_URL_TEMPLATE.format(base=base_url.rstrip("/"), icon=icon)


def format_display_name(name: str, country: str, state: Optional[str] = None) -> str:
    """Format a place as ``"Name, State, CC"``, or ``"Name, CC"`` without a state."""
    state_part = f"{state}, " if state else ""
    return f"{name}, {state_part}{country}"
