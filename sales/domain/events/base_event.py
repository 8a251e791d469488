"""Base domain event class.

Domain events represent "things that happened" in the business domain and
are always named in past tense (e.g., PaymentApproved, PaymentRefused).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) set at construction
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class PaymentApproved(DomainEvent):
    ...     payment_id: str
    >>>
    >>> event = PaymentApproved(payment_id="0192f4c1-...")
    >>> print(event.event_id)  # Auto-generated UUID
    >>> print(event.occurred_at)  # Auto-generated timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (PaymentApproved, NOT ApprovePayment)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True (force keyword arguments for clarity)
        5. Include all relevant business data for event handlers

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided. Used for tracking and deduplication.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.

    Notes:
        - Events are recorded AFTER business logic succeeds (facts, not intents)
        - Recording an event does not deliver it; see EventBusProtocol
    """

    event_id: UUID = field(default_factory=uuid4)
    """Unique identifier for this event instance."""

    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    """Timestamp when the event occurred (UTC timezone)."""
