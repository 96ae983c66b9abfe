"""Application defaults."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    default_total_spots: int = 100
    export_filename_template: str = "raffle_{total}_spots.csv"

    page_title: str = "Raffle Assistant"
    page_icon: str = "🎟️"

    # Preview table height in pixels
    preview_height: int = 420


DEFAULT_CONFIG = AppConfig()
