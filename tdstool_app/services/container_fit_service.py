"""
ISO container fit check.

Orientations are tried in a fixed priority order and the first one that
passes both the door gate (width and height through the door opening) and
the internal-space gate is chosen. Only three loading faces are considered:
as presented, turned flat through 90°, and stood on end.

Payload is checked separately and never changes ``fits``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping

from tdstool_app.config.containers import (
    CONTAINER_CATALOGUE,
    CUSTOM_PROFILE_FIELDS,
    PRESET_CUSTOM,
)
from tdstool_app.models import (
    AssetBox,
    ContainerFitResult,
    ContainerProfile,
    Orientation,
    OrientationAttempt,
)
from tdstool_app.services.parsing import parse_float, parse_non_negative, parse_optional_float

_LOG = logging.getLogger(__name__)

LABEL_NORMAL = "Normal"
LABEL_ROTATED = "Rotated 90°"
LABEL_ON_END = "On end"


@dataclass(slots=True)
class ContainerProfileError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


def _profile_from_mapping(data: Mapping[str, Any], name: str) -> ContainerProfile:
    return ContainerProfile(
        internal_length=float(data["internal_length_m"]),
        internal_width=float(data["internal_width_m"]),
        internal_height=float(data["internal_height_m"]),
        door_width=float(data["door_width_m"]),
        door_height=float(data["door_height_m"]),
        max_payload=float(data["max_payload_kg"]),
        name=name,
    )


def get_container_profile(
    preset: str,
    custom: Mapping[str, Any] | None = None,
) -> ContainerProfile:
    """
    Resolve a catalogue preset ("20std", "20hc") or a custom profile.

    A custom profile has no defaults: every dimension must be > 0 and the
    payload must be >= 0 (0 disables the payload check).
    """
    if preset in CONTAINER_CATALOGUE:
        entry = CONTAINER_CATALOGUE[preset]
        return _profile_from_mapping(entry, entry["name"])
    if preset != PRESET_CUSTOM:
        raise ContainerProfileError(
            f"Unknown container preset {preset!r}. Use one of: "
            f"{', '.join([*CONTAINER_CATALOGUE, PRESET_CUSTOM])}."
        )

    custom = custom or {}
    values = {}
    missing = []
    for key in CUSTOM_PROFILE_FIELDS:
        value = parse_optional_float(custom.get(key))
        if value is None or value < 0.0 or (value == 0.0 and key != "max_payload_kg"):
            missing.append(key)
        else:
            values[key] = value
    if missing:
        raise ContainerProfileError(f"Custom container needs valid values for: {', '.join(missing)}.")
    return _profile_from_mapping(values, str(custom.get("name") or "Custom ISO"))


def candidate_orientations(asset: AssetBox, allow_rotation: bool) -> List[Orientation]:
    """Orientations to try, in priority order."""
    length = parse_non_negative(asset.length)
    width = parse_non_negative(asset.width)
    height = parse_non_negative(asset.height)
    normal = Orientation(LABEL_NORMAL, length, width, height)
    if not allow_rotation:
        return [normal]
    return [
        normal,
        Orientation(LABEL_ROTATED, width, length, height),
        Orientation(LABEL_ON_END, height, width, length),
    ]


def evaluate_orientation(orientation: Orientation, container: ContainerProfile) -> OrientationAttempt:
    door_width_excess = orientation.width - container.door_width
    door_height_excess = orientation.height - container.door_height
    length_excess = orientation.length - container.internal_length
    width_excess = orientation.width - container.internal_width
    height_excess = orientation.height - container.internal_height
    return OrientationAttempt(
        orientation=orientation,
        door_ok=door_width_excess <= 0.0 and door_height_excess <= 0.0,
        internal_ok=length_excess <= 0.0 and width_excess <= 0.0 and height_excess <= 0.0,
        door_width_excess_m=door_width_excess,
        door_height_excess_m=door_height_excess,
        length_excess_m=length_excess,
        width_excess_m=width_excess,
        height_excess_m=height_excess,
    )


def check_container_fit(
    asset: AssetBox,
    container: ContainerProfile,
    allow_rotation: bool = True,
    payload_override: Any = None,
) -> ContainerFitResult:
    """
    Check whether ``asset`` goes through the door and fits inside ``container``.

    ``payload_override`` replaces the container's max payload when given; an
    effective payload of 0 means "no payload limit".
    """
    attempts: List[OrientationAttempt] = []
    chosen: Orientation | None = None
    for orientation in candidate_orientations(asset, allow_rotation):
        attempt = evaluate_orientation(orientation, container)
        attempts.append(attempt)
        if attempt.fits:
            chosen = orientation
            break

    override = parse_optional_float(payload_override)
    effective_payload = override if override is not None else parse_float(container.max_payload)
    payload_exceeded = effective_payload > 0.0 and parse_non_negative(asset.mass) > effective_payload

    fits = chosen is not None
    result = ContainerFitResult(
        fits=fits,
        chosen_orientation=chosen,
        door_constraint_violated=not fits and any(not a.door_ok for a in attempts),
        internal_constraint_violated=not fits and any(not a.internal_ok for a in attempts),
        payload_exceeded=payload_exceeded,
        effective_payload_kg=effective_payload,
        attempted_orientations=attempts,
    )
    _LOG.debug(
        "Container fit %s: fits=%s orientation=%s payload_exceeded=%s",
        container.name,
        fits,
        chosen.label if chosen else None,
        payload_exceeded,
    )
    return result


def describe_fit(result: ContainerFitResult) -> str:
    """One-line verdict in the form shown on the TDS sheet."""
    payload = "payload EXCEEDED" if result.payload_exceeded else "payload OK"
    if result.fits and result.chosen_orientation is not None:
        return f"PASS: orientation {result.chosen_orientation.label}; door OK, internal OK; {payload}"
    details = "; ".join(
        f"{a.orientation.label}: {', '.join(a.violations)}" for a in result.attempted_orientations
    )
    return f"FAIL: no orientation passes door & internal simultaneously ({details}); {payload}"
