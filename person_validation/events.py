"""Change notification for validation state."""

import logging
from typing import Callable, List, Optional, Union

from .fields import PersonField

logger = logging.getLogger(__name__)

Handler = Callable[[object, Optional[PersonField]], None]


class ErrorsChanged:
    """
    Subscription point fired when a field's errors may have changed.

    Handlers are called as ``handler(sender, field)``; ``field`` is None when
    every field should be re-checked. The signal carries no messages: handlers
    re-query the sender's errors_for()/get_errors() for the current state.

    The entity never emits this itself. UI bindings that write fields call
    emit() so other subscribers can refresh.
    """

    def __init__(self, sender):
        self._sender = sender
        self._handlers: List[Handler] = []

    def connect(self, handler: Handler) -> Handler:
        """Subscribe a handler. Returns it, so this works as a decorator."""
        if handler not in self._handlers:
            self._handlers.append(handler)
        return handler

    def disconnect(self, handler: Handler) -> None:
        """Unsubscribe a handler. Unknown handlers are ignored."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, field: Union[PersonField, str, None] = None) -> None:
        """Notify all handlers, in subscription order."""
        if field is not None:
            field = PersonField(field)
        logger.debug(f"Errors changed for {field or 'all fields'}",
                     extra={'handlers': len(self._handlers)})
        for handler in list(self._handlers):
            handler(self._sender, field)

    def __len__(self) -> int:
        return len(self._handlers)
