"""Payment domain entity.

A payment belongs to an Order (referenced by ID only) and moves through a
small state machine driven by the payment gateway answer.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Uses Result types (railway-oriented programming)
    - Every precondition of an operation is checked; failures are joined
    - Records domain events on terminal transitions (never publishes them)

Usage:
    from decimal import Decimal

    from sales.core.result import Failure, Success
    from sales.domain.entities import Payment
    from sales.domain.enums import PaymentMethod

    match Payment.create("order-123", Decimal("100.00"), PaymentMethod.CREDIT_CARD):
        case Success(value=payment):
            payment.define_transaction_code("TXN-123")
            payment.confirm_payment()
            events = payment.pull_domain_events()  # [PaymentApproved(...)]
        case Failure(error=error):
            # error.codes lists every violated rule
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal

from sales.core.errors import DomainError, DomainErrorGroup, join_errors
from sales.core.identity import generate_id
from sales.core.result import Failure, Result, Success
from sales.core.validation import (
    check_absent,
    check_not_absent,
    check_not_blank,
    check_positive,
)
from sales.domain.enums.payment_method import PaymentMethod
from sales.domain.enums.payment_status import PaymentStatus
from sales.domain.errors.payment_error import PaymentError
from sales.domain.events.base_event import DomainEvent
from sales.domain.events.payment_events import PaymentApproved, PaymentRefused

LOCAL_TRANSACTION_CODE_PREFIX = "LOCAL-"


@dataclass(eq=False)
class Payment:
    """Payment transaction of an order.

    State Machine:
        PENDING → AUTHORIZED (confirm_payment)
        PENDING → REFUSED (refuse_payment)
        Both targets are terminal. A transaction code must be defined
        before either transition.

    Railway-Oriented Programming:
        create() and every state transition return Result instead of
        raising. A Failure carries a DomainErrorGroup holding every
        violated precondition, and leaves the payment untouched.

    Identity:
        Two payments are equal when their IDs are equal, whatever their
        other attributes.

    Attributes:
        id: Unique payment identifier (UUIDv7 string). Never reassigned.
        order_id: Order this payment belongs to.
        amount: Strictly positive amount. Immutable.
        method: Payment channel.
        status: Current lifecycle status.
        paid_at: When the payment was authorized (AUTHORIZED only).
        updated_at: Last successful mutation (None until the first one).
        transaction_code: Gateway transaction code, defined at most once.
    """

    id: str
    order_id: str
    amount: Decimal
    method: PaymentMethod
    status: PaymentStatus = PaymentStatus.PENDING
    paid_at: datetime | None = None
    updated_at: datetime | None = None
    transaction_code: str | None = None
    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self) -> None:
        """Validate payment after initialization.

        Raises:
            ValueError: If fields are invalid or inconsistent with status.

        Note:
            Direct construction is for rehydrating known-good payments.
            Invalid input here is a programming error; new payments go
            through create(), which reports problems as a Failure.
        """
        if not self.id:
            raise ValueError("Payment ID is required")

        error = join_errors(
            check_not_blank(self.order_id, PaymentError.INVALID_ORDER_ID),
            check_positive(_to_decimal(self.amount), PaymentError.INVALID_AMOUNT),
            _check_method(self.method),
        )
        if error is not None:
            raise ValueError(str(error))
        self.amount = _to_decimal(self.amount)

        if (self.status == PaymentStatus.AUTHORIZED) != (self.paid_at is not None):
            raise ValueError("paid_at must be set if and only if status is AUTHORIZED")

        if self.status in PaymentStatus.completed_states() and self.transaction_code is None:
            raise ValueError(f"{self.status.upper()} payment must have a transaction code")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Payment):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    # -------------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        order_id: str,
        amount: Decimal | int | float,
        method: PaymentMethod,
        *,
        id_generator: Callable[[], str] = generate_id,
    ) -> Result["Payment", DomainErrorGroup]:
        """Create a new PENDING payment for an order.

        Args:
            order_id: Order ID. Must contain a non-whitespace character.
            amount: Strictly positive, finite amount. Floats are converted
                through their shortest repr (100.1 → Decimal("100.1")).
            method: Payment channel.
            id_generator: Source of the new payment ID.

        Returns:
            Success(Payment): New payment with no transaction code,
                paid_at or updated_at.
            Failure(DomainErrorGroup): Every violated rule among
                INVALID_ORDER_ID, INVALID_AMOUNT and INVALID_METHOD.
        """
        decimal_amount = _to_decimal(amount)

        error = join_errors(
            check_not_blank(order_id, PaymentError.INVALID_ORDER_ID),
            check_positive(decimal_amount, PaymentError.INVALID_AMOUNT),
            _check_method(method),
        )
        if error is not None:
            return Failure(error=error)

        return Success(
            value=cls(
                id=id_generator(),
                order_id=order_id,
                amount=decimal_amount,
                method=method,
            )
        )

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def is_pending(self) -> bool:
        """Check if the payment still awaits the gateway answer."""
        return self.status == PaymentStatus.PENDING

    def is_completed(self) -> bool:
        """Check if the payment reached AUTHORIZED or REFUSED."""
        return self.status in PaymentStatus.completed_states()

    def has_transaction_code(self) -> bool:
        """Check if a transaction code has been defined."""
        return self.transaction_code is not None

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        """Events recorded since the last pull, oldest first."""
        return tuple(self._domain_events)

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return the recorded events and forget them.

        Returns:
            list[DomainEvent]: Events in the order they were recorded.
        """
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    # -------------------------------------------------------------------------
    # State Transition Methods (Return Result)
    # -------------------------------------------------------------------------

    def define_transaction_code(self, code: str) -> Result[None, DomainErrorGroup]:
        """Assign the transaction code returned by the payment gateway.

        Args:
            code: Gateway code. Must contain a non-whitespace character.

        Returns:
            Success(None): Code stored.
            Failure(DomainErrorGroup): Any of TRANSACTION_CODE_AFTER_COMPLETION
                (payment no longer pending), INVALID_TRANSACTION_CODE (blank
                code), TRANSACTION_CODE_ALREADY_DEFINED (code already set).

        Side Effects (on success):
            - Sets transaction_code
            - Updates updated_at
        """
        error = join_errors(
            self._check_status(
                PaymentStatus.PENDING, PaymentError.TRANSACTION_CODE_AFTER_COMPLETION
            ),
            check_not_blank(code, PaymentError.INVALID_TRANSACTION_CODE),
            check_absent(self.transaction_code, PaymentError.TRANSACTION_CODE_ALREADY_DEFINED),
        )
        if error is not None:
            return Failure(error=error)

        self.transaction_code = code
        self.updated_at = datetime.now(UTC)
        return Success(value=None)

    def define_local_transaction_code(self) -> Result[None, DomainErrorGroup]:
        """Assign a locally generated code when the gateway gave none.

        Used for channels settled outside a gateway (e.g. cash). The code is
        "LOCAL-" followed by a new unique ID.

        Returns:
            Success(None): Code generated, or a code was already defined
                (left unchanged).
            Failure(DomainErrorGroup): Same failures as define_transaction_code.
        """
        if self.transaction_code is not None:
            return Success(value=None)

        return self.define_transaction_code(f"{LOCAL_TRANSACTION_CODE_PREFIX}{generate_id()}")

    def confirm_payment(self) -> Result[None, DomainErrorGroup]:
        """Transition PENDING → AUTHORIZED.

        Returns:
            Success(None): Transition successful.
            Failure(DomainErrorGroup): NOT_PENDING and/or
                TRANSACTION_CODE_NOT_DEFINED.

        Side Effects (on success):
            - Sets paid_at and updated_at to the current UTC time
            - Sets status to AUTHORIZED
            - Records a PaymentApproved event
        """
        error = self._check_can_complete()
        if error is not None:
            return Failure(error=error)

        now = datetime.now(UTC)
        self.paid_at = now
        self.status = PaymentStatus.AUTHORIZED
        self.updated_at = now
        self._record(
            PaymentApproved(
                payment_id=self.id,
                order_id=self.order_id,
                amount=self.amount,
                transaction_code=self.transaction_code,
                occurred_at=now,
            )
        )
        return Success(value=None)

    def refuse_payment(self) -> Result[None, DomainErrorGroup]:
        """Transition PENDING → REFUSED.

        Returns:
            Success(None): Transition successful.
            Failure(DomainErrorGroup): NOT_PENDING and/or
                TRANSACTION_CODE_NOT_DEFINED.

        Side Effects (on success):
            - Sets status to REFUSED (paid_at stays None)
            - Updates updated_at
            - Records a PaymentRefused event
        """
        error = self._check_can_complete()
        if error is not None:
            return Failure(error=error)

        now = datetime.now(UTC)
        self.status = PaymentStatus.REFUSED
        self.updated_at = now
        self._record(
            PaymentRefused(
                payment_id=self.id,
                order_id=self.order_id,
                amount=self.amount,
                transaction_code=self.transaction_code,
                occurred_at=now,
            )
        )
        return Success(value=None)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _check_can_complete(self) -> DomainErrorGroup | None:
        return join_errors(
            self._check_status(PaymentStatus.PENDING, PaymentError.NOT_PENDING),
            check_not_absent(self.transaction_code, PaymentError.TRANSACTION_CODE_NOT_DEFINED),
        )

    def _check_status(
        self, expected: PaymentStatus, error: DomainError
    ) -> DomainError | None:
        if self.status != expected:
            return error
        return None

    def _record(self, event: DomainEvent) -> None:
        self._domain_events.append(event)


def _check_method(method: object) -> DomainError | None:
    if not isinstance(method, PaymentMethod):
        return PaymentError.INVALID_METHOD
    return None


def _to_decimal(amount: object) -> Decimal | None:
    """Convert a numeric amount to a finite Decimal, or None if impossible."""
    if isinstance(amount, bool):
        return None
    if isinstance(amount, Decimal):
        value = amount
    elif isinstance(amount, int):
        value = Decimal(amount)
    elif isinstance(amount, float):
        value = Decimal(repr(amount))
    else:
        return None
    return value if value.is_finite() else None
