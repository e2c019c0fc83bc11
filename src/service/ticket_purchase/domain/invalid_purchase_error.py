from src.platform.exception.exceptions import DomainError
from src.service.ticket_purchase.domain.enum.purchase_error_kind import PurchaseErrorKind


class InvalidPurchaseError(DomainError):
    """Raised when a ticket purchase breaks one of the purchase rules"""

    def __init__(self, kind: PurchaseErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or kind.message, 400)
