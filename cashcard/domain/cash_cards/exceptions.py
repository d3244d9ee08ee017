"""Cash card domain specific exceptions."""


class CashCardError(Exception):
    """Base class for cash card domain errors."""


class CashCardNotFoundError(CashCardError):
    """Raised when the requested cash card could not be found."""

    def __init__(self, cash_card_id: int) -> None:
        super().__init__(f"Cash card not found: {cash_card_id}")
        self.cash_card_id = cash_card_id


class CashCardStoreError(CashCardError):
    """Raised when the persistence layer fails to serve a request."""
