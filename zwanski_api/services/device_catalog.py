"""
Zwanski API: Device Catalog
============================

What:  Static spec sheet lookup for /api/device.
How:   Exact, case-sensitive match against a read-only table; anything else
       gets the "unknown device" record. Two lifecycle fields are appended to
       every answer.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from zwanski_api.schemas.responses import DeviceResponse

DEFAULT_MODEL = "Unknown"

DEVICES: Mapping[str, Mapping[str, str]] = MappingProxyType({
    "iPhone13": MappingProxyType({
        "specs": '6.1" OLED, A15 Bionic',
        "os": "iOS 15+",
        "maintenance": "good",
        "carrier_support": "all",
    }),
    "iPhone14": MappingProxyType({
        "specs": '6.1" OLED, A16 Bionic',
        "os": "iOS 16+",
        "maintenance": "excellent",
        "carrier_support": "all",
    }),
    "Galaxy23": MappingProxyType({
        "specs": '6.1" AMOLED, Snapdragon 8 Gen 2',
        "os": "Android 13+",
        "maintenance": "very_good",
        "carrier_support": "all",
    }),
})

UNKNOWN_DEVICE: Mapping[str, str] = MappingProxyType({
    "specs": "N/A",
    "os": "Unknown",
    "maintenance": "unknown",
    "carrier_support": "check_carrier",
})

REPAIR_DIFFICULTY = "moderate"
LIFECYCLE = "active"


def lookup_device(model: Optional[str] = None) -> DeviceResponse:
    name = model or DEFAULT_MODEL
    info = DEVICES.get(name, UNKNOWN_DEVICE)
    return DeviceResponse(
        model=name,
        **info,
        repair_difficulty=REPAIR_DIFFICULTY,
        lifecycle=LIFECYCLE,
    )
