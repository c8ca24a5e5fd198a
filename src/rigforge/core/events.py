"""EventBus for decoupled publish/subscribe communication."""

from enum import Enum, auto
from typing import Any, Callable
from collections import defaultdict


class EventType(Enum):
    # Model switching
    MODEL_SELECTED = auto()       # data: key (str)
    MODEL_LOADED = auto()         # data: key (str), model (SceneNode)
    MODEL_LOAD_FAILED = auto()    # data: key (str), error (str)

    # Standard naming session
    SESSION_STARTED = auto()      # data: features (int), attachments (int), pivots (int), skipped (int)
    SESSION_ENDED = auto()
    FEATURE_CHANGED = auto()      # data: label (str), value (float), moved (int)

    # Display
    BACKGROUND_COLOR_CHANGED = auto()  # data: color (str, "#rrggbb")


class EventBus:
    """Simple publish/subscribe event system."""

    def __init__(self):
        self._handlers: dict[EventType, list[Callable]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Callable) -> None:
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: EventType, handler: Callable) -> None:
        handlers = self._handlers[event_type]
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: EventType, **data: Any) -> None:
        for handler in list(self._handlers[event_type]):
            handler(**data)

    def clear(self) -> None:
        self._handlers.clear()
