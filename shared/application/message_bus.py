"""
Message Bus

Central hub for routing commands, queries and events to their handlers.
Implements the Mediator pattern: the HTTP layer only knows the bus and the
message types, never the handlers or the storage behind them.
"""

from typing import Any, Callable, Dict, List, Optional, Type
import logging

from shared.domain.base import DomainEvent

logger = logging.getLogger(__name__)


class MessageBus:
    """
    Message bus for commands, queries and events

    Commands and queries: One handler per message type (1:1), optionally
    preceded by a validator that raises ValidationFailed.
    Events: Multiple handlers per event (1:N)
    """

    def __init__(self):
        self._event_handlers: Dict[Type[DomainEvent], List[Callable]] = {}
        self._handlers: Dict[Type, Callable] = {}
        self._validators: Dict[Type, Callable] = {}

    def register_event_handler(
        self,
        event_type: Type[DomainEvent],
        handler: Callable[[DomainEvent], None]
    ):
        """
        Register an event handler

        Multiple handlers can be registered for the same event type.
        """
        self._event_handlers.setdefault(event_type, []).append(handler)
        logger.debug(f"Registered event handler for {event_type.__name__}")

    def register_handler(
        self,
        message_type: Type,
        handler: Callable[[Any], Any],
        validator: Optional[Callable[[Any], None]] = None,
    ):
        """
        Register a command or query handler

        Only one handler can be registered per message type.
        """
        if message_type in self._handlers:
            raise ValueError(
                f"Handler for {message_type.__name__} is already registered. "
                "Messages can have only one handler."
            )
        self._handlers[message_type] = handler
        if validator is not None:
            self._validators[message_type] = validator
        logger.debug(f"Registered handler for {message_type.__name__}")

    def send(self, message: Any) -> Any:
        """
        Validate and handle a command or query

        Returns the result from the handler.
        Raises ValueError if no handler is registered.
        """
        message_type = type(message)
        handler = self._handlers.get(message_type)

        if not handler:
            raise ValueError(
                f"No handler registered for message {message_type.__name__}"
            )

        validator = self._validators.get(message_type)
        if validator is not None:
            validator(message)

        logger.info(f"Handling message: {message_type.__name__}")
        try:
            result = handler(message)
            logger.debug(f"Message {message_type.__name__} handled successfully")
            return result
        except Exception as e:
            logger.error(f"Error handling message {message_type.__name__}: {e}")
            raise

    def publish_events(self, events: List[DomainEvent]):
        """
        Publish domain events

        All registered handlers for each event type will be called.
        Errors in handlers are logged but don't stop other handlers.
        """
        for event in events:
            event_type = type(event)
            handlers = self._event_handlers.get(event_type, [])

            if not handlers:
                logger.warning(f"No handlers registered for event {event_type.__name__}")
                continue

            logger.info(f"Publishing event: {event_type.__name__} (ID: {event.event_id})")

            for handler in handlers:
                try:
                    handler(event)
                    logger.debug(f"Event {event_type.__name__} handled by {getattr(handler, '__name__', handler)}")
                except Exception as e:
                    logger.error(
                        f"Error in event handler {getattr(handler, '__name__', handler)} "
                        f"for event {event_type.__name__}: {e}",
                        exc_info=True
                    )
                    # Don't raise - other handlers should still run
