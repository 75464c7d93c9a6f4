"""
Centralized settings and path configuration for the checkout tool.
"""
from pathlib import Path
from dataclasses import dataclass
from typing import Optional


def get_data_dir() -> Path:
    """Directory holding the bundled seed CSVs."""
    return Path(__file__).resolve().parent.parent / 'data'


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Seed files
    catalog_csv: Path
    stock_csv: Path

    # API server
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Streamlit UI
    ui_port: int = 8501

    @classmethod
    def load(cls, data_dir: Optional[Path] = None) -> 'Settings':
        """Load settings, reading seed files from `data_dir` when given."""
        data = Path(data_dir) if data_dir is not None else get_data_dir()

        return cls(
            catalog_csv=data / 'catalog.csv',
            stock_csv=data / 'stock.csv',
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
