"""Runtime settings loaded from the environment"""
import logging
import os
from dataclasses import dataclass, asdict

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

DEFAULT_EXPORT_NAME = 'Trafexia Export'
DEFAULT_STATIC_EXPORT_NAME = 'Trafexia Static Analysis'


@dataclass
class Settings:
    """CLI and logging settings"""
    log_level: str = 'WARNING'      # Any logging level name
    export_name: str = DEFAULT_EXPORT_NAME              # Captured-request collections
    static_export_name: str = DEFAULT_STATIC_EXPORT_NAME  # Static-analysis collections
    output_dir: str = '.'           # Where collection files are written

    @property
    def level(self) -> int:
        """Numeric logging level, falling back to WARNING for unknown names."""
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.WARNING

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'Settings':
        return cls(
            log_level=data.get('log_level', 'WARNING'),
            export_name=data.get('export_name', DEFAULT_EXPORT_NAME),
            static_export_name=data.get('static_export_name', DEFAULT_STATIC_EXPORT_NAME),
            output_dir=data.get('output_dir', '.'),
        )


def load_settings() -> Settings:
    """Build settings from TRAFEXIA_* environment variables."""
    env = {
        'log_level': os.getenv('TRAFEXIA_LOG_LEVEL'),
        'export_name': os.getenv('TRAFEXIA_EXPORT_NAME'),
        'static_export_name': os.getenv('TRAFEXIA_STATIC_EXPORT_NAME'),
        'output_dir': os.getenv('TRAFEXIA_OUTPUT_DIR'),
    }
    # Only include non-empty values so defaults apply
    return Settings.from_dict({k: v for k, v in env.items() if v})
