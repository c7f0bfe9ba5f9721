"""Asset path definitions for the Half-Wit receiver.

Provides centralized access to the icon and badge directories relative to
the package root.
"""

from pathlib import Path

# Base directories relative to this package
PROJECT_ROOT = Path(__file__).resolve().parent.parent
ASSETS_DIR = PROJECT_ROOT / "assets"
ICONS_DIR = ASSETS_DIR / "icons"
BADGES_DIR = ASSETS_DIR / "badges"

FALLBACK_ICON = ICONS_DIR / "unknown.png"
WINNER_BADGE = BADGES_DIR / "halfwit_winner.png"
LOSER_BADGE = BADGES_DIR / "halfwit_loser.png"
