# lightbnb/__init__.py
from .errors import DatabaseError, IntegrityError, StoreUnavailableError
from .models import PropertyIn, SearchFilters, UserIn
from .search import DEFAULT_LIMIT, Predicate, QueryPlan, build_property_search

__all__ = [
    "DatabaseError",
    "IntegrityError",
    "StoreUnavailableError",
    "PropertyIn",
    "SearchFilters",
    "UserIn",
    "DEFAULT_LIMIT",
    "Predicate",
    "QueryPlan",
    "build_property_search",
]
