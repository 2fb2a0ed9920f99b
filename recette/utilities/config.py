"""Configuration management for the Recette application."""
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

# Recipe store: "json" (file under DATA_DIR) or "memory" (demo recipes only)
RECIPE_STORE: Final[str] = os.getenv('RECIPE_STORE', 'json').lower()

# Calorie dashboard
DAILY_CALORIE_GOAL: Final[int] = int(os.getenv('DAILY_CALORIE_GOAL', '2000'))

# Liked recipes shelf
LIKED_MIN_LIKES: Final[int] = int(os.getenv('LIKED_MIN_LIKES', '5'))
LIKED_LIMIT: Final[int] = int(os.getenv('LIKED_LIMIT', '10'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('RECETTE_DATA_DIR', str(BASE_DIR / 'data')))
