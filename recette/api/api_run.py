from fastapi import FastAPI
import logging

from recette.api.routes import auth, calories, recipes, shopping
from recette.events.Event_Bus import GLOBAL_EVENT_BUS, SHOPPING_SELECTION_CHANGED

# Logging
logger = logging.getLogger("recette_app")

# Initialize FastAPI app
app = FastAPI(title="Recette Recipes & Shopping List API")

# Include routers
app.include_router(recipes.router)
app.include_router(shopping.router)
app.include_router(auth.router)
app.include_router(calories.router)


def _log_selection_change(event_name, payload):
    result = payload.get('result') if isinstance(payload, dict) else None
    if result is not None:
        logger.debug("%s: %d items, budget=%s, calories=%s", event_name,
                     len(result.items), result.total_budget, result.total_calories)


@app.on_event("startup")
def _startup_event_logging():
    """Register an event bus subscriber that traces shopping-list recomputes."""
    GLOBAL_EVENT_BUS.subscribe(SHOPPING_SELECTION_CHANGED, _log_selection_change)
    logger.info("Recette API started")


@app.get("/api/health")
def health():
    return {"status": "ok"}
