"""
ISO container catalogue (internal and door dimensions in m, payload in kg).

Values follow the 20 ft ISO dry-van figures used on the TDS container-fit
sheet. A custom profile has no defaults; every field comes from the caller.
"""

from __future__ import annotations

PRESET_20FT_STANDARD = "20std"
PRESET_20FT_HIGH_CUBE = "20hc"
PRESET_CUSTOM = "custom"

CONTAINER_CATALOGUE = {
    PRESET_20FT_STANDARD: {
        "name": "20 ft ISO (Standard)",
        "internal_length_m": 5.90,
        "internal_width_m": 2.35,
        "internal_height_m": 2.39,
        "door_width_m": 2.34,
        "door_height_m": 2.28,
        "max_payload_kg": 30480.0,
    },
    PRESET_20FT_HIGH_CUBE: {
        "name": "20 ft ISO (High Cube)",
        "internal_length_m": 5.90,
        "internal_width_m": 2.35,
        "internal_height_m": 2.69,
        "door_width_m": 2.34,
        "door_height_m": 2.58,
        "max_payload_kg": 30480.0,
    },
}

# Fields a custom profile must supply
CUSTOM_PROFILE_FIELDS = (
    "internal_length_m",
    "internal_width_m",
    "internal_height_m",
    "door_width_m",
    "door_height_m",
    "max_payload_kg",
)
