from .currency import Currency
from .entity_identifier import EntityIdentifier
from .money import Money

__all__ = ["Currency", "EntityIdentifier", "Money"]
