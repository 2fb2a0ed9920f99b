from recette.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = _CONFIGURED_DATA_DIR.resolve()
RECIPES_FILE = DATA_DIR / 'recipes.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE']
