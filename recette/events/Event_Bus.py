"""Simple Event Bus / Observer implementation for application events.

Event names:
  shopping.selection_changed -> payload {"selection": ShoppingSelection, "result": ShoppingListResult}
  recipe.liked               -> payload {"recipe": Recipe}
  recipe.deleted             -> payload {"recipe_id": str}
  auth.signed_in             -> payload {"user": str, "provider": str}
  auth.signed_out            -> payload {"user": str}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
SHOPPING_SELECTION_CHANGED = "shopping.selection_changed"
RECIPE_LIKED = "recipe.liked"
RECIPE_DELETED = "recipe.deleted"
AUTH_SIGNED_IN = "auth.signed_in"
AUTH_SIGNED_OUT = "auth.signed_out"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS',
	'SHOPPING_SELECTION_CHANGED', 'RECIPE_LIKED', 'RECIPE_DELETED', 'AUTH_SIGNED_IN', 'AUTH_SIGNED_OUT'
]
