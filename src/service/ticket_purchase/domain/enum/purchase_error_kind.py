from enum import StrEnum


class PurchaseErrorKind(StrEnum):
    """Which purchase rule failed, listed in the order the rules are checked"""

    ACCOUNT_MISSING = 'account_missing'
    ACCOUNT_NON_POSITIVE = 'account_non_positive'
    REQUEST_MISSING = 'request_missing'
    REQUEST_EMPTY = 'request_empty'
    LIMIT_EXCEEDED = 'limit_exceeded'
    MISSING_ADULT = 'missing_adult'
    INFANT_EXCEEDS_ADULT = 'infant_exceeds_adult'

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[PurchaseErrorKind, str] = {
    PurchaseErrorKind.ACCOUNT_MISSING: 'AccountId cannot be null',
    PurchaseErrorKind.ACCOUNT_NON_POSITIVE: 'AccountId must be greater than zero',
    PurchaseErrorKind.REQUEST_MISSING: 'Ticket type request cannot be null',
    PurchaseErrorKind.REQUEST_EMPTY: 'Ticket type request cannot be empty',
    PurchaseErrorKind.LIMIT_EXCEEDED: 'Maximum ticket size exceeded',
    PurchaseErrorKind.MISSING_ADULT: 'Request must contain an adult ticket',
    PurchaseErrorKind.INFANT_EXCEEDS_ADULT: 'Infant ticket must not be more than adult ticket',
}
