from . import cash_cards

__all__ = ["cash_cards"]
