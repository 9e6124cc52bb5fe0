"""
Parameterized SQL builder for the property search.

Filters are turned into a list of predicate descriptors, then folded into a
single statement. Values never touch the statement text: each one is bound
as ``:p1``, ``:p2``, ... in the order it was added.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_CEILING
from typing import Any, Dict, List, Optional, Tuple, Union
from lightbnb.schemas.property import PropertySearchFilters

CENTS_PER_UNIT = 100

BASE_SELECT = (
    "SELECT properties.*, avg(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "JOIN property_reviews ON properties.id = property_reviews.property_id"
)


@dataclass(frozen=True)
class Predicate:
    """A single filter condition: ``<column> <operator> <bound value>``."""

    column: str
    operator: str
    value: Any


def clause_prefix(index: int) -> str:
    """Keyword introducing the predicate at ``index`` in the WHERE chain."""
    return "WHERE" if index == 0 else "AND"


def to_minor_units(amount: Union[Decimal, int, float, str]) -> int:
    """
    Convert a price in major units to a whole-cents bound.

    Fractional cents round up: for integer ``cost``, ``cost >= x`` and
    ``cost < x`` hold exactly when they hold against ``ceil(x)``.
    """
    return int((Decimal(str(amount)) * CENTS_PER_UNIT).to_integral_value(rounding=ROUND_CEILING))


class PropertySearchQuery:
    """
    Builds the property search statement for a set of filters.

    Predicates are collected in a fixed order (city, owner, minimum price,
    maximum price), so the first one present always gets ``WHERE``.
    """

    def __init__(self, filters: Optional[PropertySearchFilters] = None, limit: int = 10):
        self.filters = filters or PropertySearchFilters()
        self.limit = limit

    def predicates(self) -> List[Predicate]:
        """Pre-aggregation predicates for the filters that are set."""
        filters = self.filters
        predicates = []

        if filters.city:
            predicates.append(Predicate("properties.city", "LIKE", f"%{filters.city}%"))

        if filters.user_id:
            predicates.append(Predicate("properties.owner_id", "=", filters.user_id))

        if filters.minimum_price_per_night:
            predicates.append(
                Predicate("properties.cost_per_night", ">=", to_minor_units(filters.minimum_price_per_night))
            )

        if filters.maximum_price_per_night:
            predicates.append(
                Predicate("properties.cost_per_night", "<", to_minor_units(filters.maximum_price_per_night))
            )

        return predicates

    def having(self) -> Optional[Predicate]:
        """Post-aggregation rating filter, if requested."""
        if self.filters.minimum_rating:
            return Predicate("avg(property_reviews.rating)", ">=", float(self.filters.minimum_rating))
        return None

    def build(self) -> Tuple[str, Dict[str, Any]]:
        """
        Assemble the statement.

        Returns:
            Tuple of (SQL text with named placeholders, bound parameters)
        """
        params: Dict[str, Any] = {}

        def bind(value: Any) -> str:
            name = f"p{len(params) + 1}"
            params[name] = value
            return f":{name}"

        lines = [BASE_SELECT]

        for index, predicate in enumerate(self.predicates()):
            lines.append(f"{clause_prefix(index)} {predicate.column} {predicate.operator} {bind(predicate.value)}")

        lines.append("GROUP BY properties.id")

        having = self.having()
        if having is not None:
            lines.append(f"HAVING {having.column} {having.operator} {bind(having.value)}")

        lines.append("ORDER BY properties.cost_per_night ASC")
        lines.append(f"LIMIT {bind(self.limit)}")

        return "\n".join(lines), params
