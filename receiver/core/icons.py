"""Player icon lookup and per-icon visual tuning.

Each icon PNG has a different amount of transparent padding. The ratios
below are fractions of the icon container so every icon looks the same size
and sits centred at any display size.
"""

from __future__ import annotations

from dataclasses import dataclass

from kivy.logger import Logger

from receiver.config.paths import FALLBACK_ICON, ICONS_DIR

ICON_SIZE_RATIO = {
    "accordion": 44/56,
    "axolotl": 46/56, "butterfly": 46/56, "dumpster_fire": 46/56,
    "goldfish_bag": 46/56, "jellyfish": 46/56,
    "cuckoo_clock": 48/56, "mushroom": 48/56, "telescope": 48/56,
    "cactus": 50/56, "disco_ball": 50/56,
    "bonsai": 52/56, "penguin": 52/56, "rubber_duck": 52/56, "ufo": 52/56,
    "snail": 57/56,
}
ICON_OFFSET_Y = {
    "axolotl": 3/56, "cuckoo_clock": 1/56, "disco_ball": 2/56, "goldfish_bag": 2/56,
    "jellyfish": -2/56, "mushroom": -2/56, "penguin": -2/56,
    "cactus": -3/56, "dumpster_fire": -3/56, "rubber_duck": -3/56, "snail": -3/56,
    "ufo": -7/56,
}
ICON_OFFSET_X = {
    "cuckoo_clock": 1/56, "snail": 2/56, "telescope": 2/56, "rubber_duck": -1/56,
}
DEFAULT_SIZE_RATIO = 44/56

_reported_missing = set()


@dataclass(frozen=True, slots=True)
class IconGeometry:
    scale: float
    offset_x: float  # fraction of the container, positive is right
    offset_y: float  # fraction of the container, positive is down

    def place(self, container_size):
        """Return (size, (dx, dy)) in pixels for a square container."""
        size = container_size * self.scale
        return size, (self.offset_x * container_size, self.offset_y * container_size)


def icon_geometry(icon_id: str) -> IconGeometry:
    return IconGeometry(
        scale=ICON_SIZE_RATIO.get(icon_id, DEFAULT_SIZE_RATIO),
        offset_x=ICON_OFFSET_X.get(icon_id, 0.0),
        offset_y=ICON_OFFSET_Y.get(icon_id, 0.0),
    )


def icon_source(icon_id: str, icons_dir=ICONS_DIR, fallback=FALLBACK_ICON) -> str:
    """Resolve an icon id to an image path, falling back when it is missing.

    A missing icon never aborts a screen update; it is logged once per id.
    """
    path = icons_dir / f"{icon_id}.png"
    if icon_id and path.exists():
        return str(path)
    if icon_id not in _reported_missing:
        _reported_missing.add(icon_id)
        Logger.warning(f"Icons: no image for icon {icon_id!r}, using fallback")
    return str(fallback)
