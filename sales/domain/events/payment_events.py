"""Payment domain events.

Recorded by the Payment entity when it reaches a terminal status:

    PENDING → AUTHORIZED  ⇒ PaymentApproved
    PENDING → REFUSED     ⇒ PaymentRefused

Each event is an immutable snapshot of the payment at the moment of the
transition. Events are collected on the entity; publishing them is left to
whoever holds an EventBusProtocol.
"""

from dataclasses import dataclass
from decimal import Decimal

from sales.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class PaymentApproved(DomainEvent):
    """Payment was authorized by the gateway.

    Attributes:
        payment_id: ID of the authorized payment.
        order_id: Order the payment belongs to.
        amount: Authorized amount.
        transaction_code: Gateway transaction code of the authorization.
    """

    payment_id: str
    order_id: str
    amount: Decimal
    transaction_code: str


@dataclass(frozen=True, kw_only=True, slots=True)
class PaymentRefused(DomainEvent):
    """Payment was declined by the gateway.

    Attributes:
        payment_id: ID of the refused payment.
        order_id: Order the payment belongs to.
        amount: Amount that was declined.
        transaction_code: Gateway transaction code of the attempt.
    """

    payment_id: str
    order_id: str
    amount: Decimal
    transaction_code: str
