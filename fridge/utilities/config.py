"""Configuration management for the Fridge Tracker application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Reminder Configuration
REMINDER_HOUR: Final[int] = int(os.getenv('REMINDER_HOUR', '9'))
NOTIFICATIONS_ENABLED: Final[bool] = os.getenv('NOTIFICATIONS_ENABLED', 'True').lower() == 'true'


# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('FRIDGE_DATA_DIR', str(BASE_DIR / 'data')))
STORE_FILE_NAME: Final[str] = os.getenv('FRIDGE_STORE_FILE', 'store.json')
