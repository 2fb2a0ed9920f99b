"""Event helper utilities.

Thin publishing wrappers so callers do not build payload dicts by hand.

Quick import:
    from recette.events.event_helpers import (
        publish_selection_changed, publish_recipe_liked, publish_recipe_deleted,
        publish_signed_in, publish_signed_out
    )
"""
from __future__ import annotations
from typing import Any, Optional

from .Event_Bus import (
    EventBus, GLOBAL_EVENT_BUS,
    SHOPPING_SELECTION_CHANGED, RECIPE_LIKED, RECIPE_DELETED, AUTH_SIGNED_IN, AUTH_SIGNED_OUT
)

__all__ = [
    'publish_selection_changed', 'publish_recipe_liked', 'publish_recipe_deleted',
    'publish_signed_in', 'publish_signed_out'
]


def _bus(bus: Optional[EventBus]) -> EventBus:
    return bus if bus is not None else GLOBAL_EVENT_BUS


def publish_selection_changed(selection: Any, result: Any, bus: Optional[EventBus] = None):
    """Publish a shopping.selection_changed event with the freshly derived list."""
    _bus(bus).publish(SHOPPING_SELECTION_CHANGED, {'selection': selection, 'result': result})


def publish_recipe_liked(recipe: Any, bus: Optional[EventBus] = None):
    _bus(bus).publish(RECIPE_LIKED, {'recipe': recipe})


def publish_recipe_deleted(recipe_id: str, bus: Optional[EventBus] = None):
    _bus(bus).publish(RECIPE_DELETED, {'recipe_id': recipe_id})


def publish_signed_in(user: str, provider: str, bus: Optional[EventBus] = None):
    _bus(bus).publish(AUTH_SIGNED_IN, {'user': user, 'provider': provider})


def publish_signed_out(user: str, bus: Optional[EventBus] = None):
    _bus(bus).publish(AUTH_SIGNED_OUT, {'user': user})
