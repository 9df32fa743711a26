"""
Event System Module

Publish/subscribe dispatcher for domain events raised by the ATM and the
banking system. Subscribers decide how to present or record outcomes.
"""

from enum import Enum
from typing import Callable, Dict, List, Any, Optional
from dataclasses import dataclass, field
from datetime import datetime, timezone
import uuid
import logging
from threading import RLock


class DomainEvent(Enum):
    """Domain events that can occur in the banking system"""

    # Account events
    ACCOUNT_OPENED = "account.opened"
    ACCOUNT_CLOSED = "account.closed"

    # Transaction events
    DEPOSIT_COMPLETED = "transaction.deposit"
    WITHDRAWAL_COMPLETED = "transaction.withdrawal"
    INTEREST_APPLIED = "transaction.interest"
    TRANSACTION_FAILED = "transaction.failed"


@dataclass
class EventPayload:
    """Payload for domain events"""
    event_type: DomainEvent
    entity_type: str
    entity_id: str
    data: Dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'event_type': self.event_type.value,
            'entity_type': self.entity_type,
            'entity_id': self.entity_id,
            'data': self.data,
            'timestamp': self.timestamp.isoformat(),
            'event_id': self.event_id
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EventPayload':
        """Create from dictionary"""
        return cls(
            event_type=DomainEvent(data['event_type']),
            entity_type=data['entity_type'],
            entity_id=data['entity_id'],
            data=data['data'],
            timestamp=datetime.fromisoformat(data['timestamp']) if isinstance(data['timestamp'], str) else data['timestamp'],
            event_id=data['event_id']
        )


def _handler_name(handler: Callable) -> str:
    return getattr(handler, '__name__', repr(handler))


class EventDispatcher:
    """Central event dispatcher, publish/subscribe pattern"""

    def __init__(self):
        self._handlers: Dict[DomainEvent, List[Callable]] = {}
        self._global_handlers: List[Callable] = []  # catch-all handlers
        self._lock = RLock()
        self.logger = logging.getLogger("atm_banking.events")

    def subscribe(self, event_type: DomainEvent, handler: Callable) -> None:
        """Subscribe to a specific event type"""
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)
            self.logger.debug(f"Subscribed handler {_handler_name(handler)} to {event_type.value}")

    def subscribe_all(self, handler: Callable) -> None:
        """Subscribe to ALL events"""
        with self._lock:
            self._global_handlers.append(handler)
            self.logger.debug(f"Subscribed global handler {_handler_name(handler)}")

    def unsubscribe(self, event_type: DomainEvent, handler: Callable) -> None:
        """Unsubscribe from a specific event type"""
        with self._lock:
            if event_type in self._handlers:
                try:
                    self._handlers[event_type].remove(handler)
                    self.logger.debug(f"Unsubscribed handler {_handler_name(handler)} from {event_type.value}")
                except ValueError:
                    self.logger.warning(f"Handler {_handler_name(handler)} was not subscribed to {event_type.value}")

    def unsubscribe_all(self, handler: Callable) -> None:
        """Unsubscribe a catch-all handler"""
        with self._lock:
            try:
                self._global_handlers.remove(handler)
                self.logger.debug(f"Unsubscribed global handler {_handler_name(handler)}")
            except ValueError:
                self.logger.warning(f"Global handler {_handler_name(handler)} was not subscribed")

    def publish(self, event: EventPayload) -> None:
        """Publish event to all subscribers"""
        with self._lock:
            self.logger.debug(f"Publishing event {event.event_type.value} for {event.entity_type}:{event.entity_id}")

            handlers = list(self._handlers.get(event.event_type, [])) + list(self._global_handlers)
            for handler in handlers:
                try:
                    handler(event)
                except Exception as e:
                    # Log but don't break the main operation
                    self.logger.error(f"Error in event handler {_handler_name(handler)} for {event.event_type.value}: {e}")

    def clear(self) -> None:
        """Clear all handlers"""
        with self._lock:
            self._handlers.clear()
            self._global_handlers.clear()
            self.logger.info("All event handlers cleared")

    def get_handler_count(self, event_type: Optional[DomainEvent] = None) -> int:
        """Get count of handlers for a specific event type or all"""
        with self._lock:
            if event_type:
                return len(self._handlers.get(event_type, []))
            total = sum(len(handlers) for handlers in self._handlers.values())
            return total + len(self._global_handlers)

    def get_subscribed_events(self) -> List[DomainEvent]:
        """Get list of events that have subscribers"""
        with self._lock:
            return [event_type for event_type, handlers in self._handlers.items() if handlers]


_OUTCOME_EVENTS = {
    "deposit": DomainEvent.DEPOSIT_COMPLETED,
    "withdrawal": DomainEvent.WITHDRAWAL_COMPLETED,
    "interest_credit": DomainEvent.INTEREST_APPLIED,
}


def create_transaction_event(outcome) -> EventPayload:
    """Create an event for a successful TransactionOutcome"""
    return EventPayload(
        event_type=_OUTCOME_EVENTS[outcome.transaction_type.value],
        entity_type="account",
        entity_id=outcome.account_number,
        data=outcome.to_dict()
    )


def create_failure_event(account_number: str, operation: str, amount: float, error: Exception) -> EventPayload:
    """Create an event for a failed account operation"""
    return EventPayload(
        event_type=DomainEvent.TRANSACTION_FAILED,
        entity_type="account",
        entity_id=account_number,
        data={
            "operation": operation,
            "amount": amount,
            "error_type": type(error).__name__,
            "message": str(error)
        }
    )


def create_account_event(event_type: DomainEvent, account) -> EventPayload:
    """Create an account lifecycle event"""
    return EventPayload(
        event_type=event_type,
        entity_type="account",
        entity_id=account.account_number,
        data={
            "account_number": account.account_number,
            "account_type": account.account_type.value,
            "balance": account.balance
        }
    )
