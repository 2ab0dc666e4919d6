from .daily import DailyFact, DailyFactStore
from .loader import FactsLoadError, load_facts_file
from .models import Category, Fact, validate_fact
from .store import ALL_CATEGORIES, FactStore

__all__ = [
    "ALL_CATEGORIES",
    "Category",
    "DailyFact",
    "DailyFactStore",
    "Fact",
    "FactStore",
    "FactsLoadError",
    "load_facts_file",
    "validate_fact",
]
