# lightbnb/search.py
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from .models import SearchFilters

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10

_BASE_QUERY = """SELECT properties.*, avg(property_reviews.rating) AS average_rating
FROM properties
JOIN property_reviews ON properties.id = property_reviews.property_id"""

@dataclass(frozen=True)
class Predicate:
    fragment: str  # "{}" marks the placeholder slot
    value: Any

@dataclass(frozen=True)
class QueryPlan:
    predicates: tuple[Predicate, ...] = ()
    limit: int = DEFAULT_LIMIT

    @property
    def params(self) -> list[Any]:
        return [p.value for p in self.predicates] + [self.limit]

    @property
    def text(self) -> str:
        # placeholders and WHERE/AND are numbered here, never while collecting
        lines = [_BASE_QUERY]
        for position, predicate in enumerate(self.predicates, start=1):
            keyword = "WHERE" if position == 1 else "AND"
            lines.append(f"{keyword} {predicate.fragment.format(f'${position}')}")
        lines.append("GROUP BY properties.id")
        lines.append("ORDER BY properties.cost_per_night, properties.id")
        lines.append(f"LIMIT ${len(self.predicates) + 1};")
        return "\n".join(lines)

def _to_major_units(cents: Decimal) -> Decimal:
    return Decimal(cents) / 100

def build_property_search(
    filters: Union[SearchFilters, Mapping[str, Any], None] = None,
    limit: Optional[int] = DEFAULT_LIMIT,
) -> QueryPlan:
    """Filters apply in a fixed order: city, owner, min price, max price, min rating.

    Prices arrive in cents and bind in major units. The limit is always the
    last param and falls back to DEFAULT_LIMIT when missing or not positive.
    """
    if filters is None:
        filters = SearchFilters()
    elif not isinstance(filters, SearchFilters):
        filters = SearchFilters.model_validate(dict(filters))

    if limit is None or limit < 1:
        limit = DEFAULT_LIMIT

    predicates: list[Predicate] = []
    if filters.city is not None:
        predicates.append(Predicate("properties.city LIKE {}", f"%{filters.city}%"))
    if filters.owner_id is not None:
        predicates.append(Predicate("properties.owner_id = {}", filters.owner_id))
    if filters.minimum_price_per_night is not None:
        predicates.append(
            Predicate(
                "properties.cost_per_night >= {}",
                _to_major_units(filters.minimum_price_per_night),
            )
        )
    if filters.maximum_price_per_night is not None:
        predicates.append(
            Predicate(
                "properties.cost_per_night <= {}",
                _to_major_units(filters.maximum_price_per_night),
            )
        )
    if filters.minimum_rating is not None:
        predicates.append(Predicate("property_reviews.rating >= {}", filters.minimum_rating))

    logger.debug("Built property search with %d predicate(s), limit %d", len(predicates), limit)
    return QueryPlan(predicates=tuple(predicates), limit=limit)
