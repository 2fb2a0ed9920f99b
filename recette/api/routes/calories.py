from datetime import date as _date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from recette.api.dependencies import get_health_provider
from recette.infra.Health_Provider import HealthDataProvider, fetch_today_step_count
from recette.logic.reporting.calories import compute_calorie_summary

router = APIRouter(prefix="/api/calories", tags=["calories"])


@router.get("/summary")
def calorie_summary(food: int = Query(default=0, ge=0),
                    exercise: int = Query(default=0, ge=0),
                    goal: Optional[int] = Query(default=None, ge=0),
                    health: HealthDataProvider = Depends(get_health_provider)):
    """Today's calorie balance plus the step count read from the health-data provider."""
    steps = fetch_today_step_count(health)
    summary = compute_calorie_summary(food=food, exercise=exercise, steps=steps, goal=goal)
    return {"date": _date.today().isoformat(), **summary}
