"""
Constants for the load-restraint and load-planning calculators.

Units: metres, kilograms, deca-Newtons (daN) for strap ratings and anchor
loads, Newtons internally for forces, accelerations in multiples of g.
"""

from __future__ import annotations

# Standard gravity (m/s^2); used when the caller leaves gravity blank or <= 0
DEFAULT_GRAVITY_M_S2 = 9.81

# Safety factor applied when a direction has none (or a non-positive one)
DEFAULT_SAFETY_FACTOR = 1.0

# Anchor margin multiplier when the caller leaves it blank
DEFAULT_ANCHOR_MARGIN = 1.0

# 1 daN = 10 N
N_PER_DAN = 10.0

# Strap rating units accepted by the lashing form, as Newtons per unit
FORCE_UNITS_N = {
    "N": 1.0,
    "daN": 10.0,
    "kN": 1000.0,
}

# A lashing at or beyond this angle from horizontal gives no restraint
MAX_LASHING_ANGLE_DEG = 90.0

# Restraint presets: friction coefficient and design accelerations (g).
# Defence values: forward 0.8 g, rearward 0.5 g, lateral 0.5 g, no friction credit.
RESTRAINT_PRESETS = {
    "defence": {
        "friction_coefficient": 0.00,
        "accel_g": {"Forward": 0.80, "Rearward": 0.50, "Lateral": 0.50},
    },
    "uk": {
        "friction_coefficient": 0.30,
        "accel_g": {"Forward": 0.80, "Rearward": 0.50, "Lateral": 0.50},
    },
}

# Starter lashing plan: (strap count, rating daN, angle deg) per direction.
# Start here and add straps to any direction that shows FAIL.
STARTER_PLAN = {
    "Forward": (4, 2000.0, 20.0),
    "Rearward": (2, 4000.0, 10.0),
    "Lateral": (4, 2000.0, 30.0),
}

# Placeholder shown for values that do not exist (e.g. CoG of zero mass)
MISSING_VALUE = "–"

# Floating-point tolerance
EPS = 1e-9
