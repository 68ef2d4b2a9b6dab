"""
Base Domain Classes

Foundational building blocks for the domain model:
- Entity: Objects with unique identity
- ValueObject: Immutable objects compared by value
- Aggregate: Consistency boundaries that collect domain events
- DomainEvent: Events that represent something that happened
"""

from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True)
class Entity(ABC):
    """
    Base class for all entities

    Entities have unique identity and are mutable.
    Two entities are equal if their IDs are equal.
    """
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass


@dataclass(kw_only=True, eq=False)
class Aggregate(Entity):
    """
    Base class for aggregate roots

    Aggregates collect domain events that are published after the
    surrounding transaction commits.
    """
    _events: List['DomainEvent'] = field(default_factory=list, repr=False, init=False)

    def add_event(self, event: 'DomainEvent'):
        """Add a domain event to be published"""
        self._events.append(event)

    def clear_events(self):
        """Clear all collected events (called after publishing)"""
        self._events.clear()

    @property
    def events(self) -> List['DomainEvent']:
        """Get copy of collected events"""
        return self._events.copy()


@dataclass(kw_only=True)
class DomainEvent:
    """
    Base class for domain events

    Domain events represent something that happened in the domain.
    """
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=utcnow)
    aggregate_id: Optional[UUID] = None
