"""
Query Parameter Parsing

FLOW OVERVIEW
- parse_int(value, default) → leading-integer coercion; missing/unparsable/non-positive → default.
- parse_sort(value) → 'asc' | 'desc', defaulting to 'desc'.
- parse_populate(value, allowed) → ordered, de-duplicated relation names recognized in a CSV token list.
- ListQuery.from_args(args) → page/limit/sort/populate bundle for the list endpoint.
- resolve_relations(populate, default_all) → relations to eager-load for a single-record fetch.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from ..models import Student

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
DEFAULT_SORT = 'desc'
SORT_DIRECTIONS = ('asc', 'desc')

_LEADING_INT = re.compile(r'^\s*([+-]?[0-9]+)')


def parse_int(value: Optional[str], default: int) -> int:
    """Coerce the leading integer of `value` ("5abc" → 5), falling back to `default`."""
    if value is None:
        return default
    match = _LEADING_INT.match(str(value))
    if not match:
        return default
    number = int(match.group(1))
    return number if number > 0 else default


def parse_sort(value: Optional[str]) -> str:
    direction = (value or '').strip().lower()
    return direction if direction in SORT_DIRECTIONS else DEFAULT_SORT


def parse_populate(value: Optional[str], allowed: Tuple[str, ...] = Student.RELATIONS) -> Tuple[str, ...]:
    """
    Split a comma-separated populate value into recognized relation names.

    Tokens are trimmed and matched case-insensitively; unknown tokens are
    ignored and duplicates collapse, keeping first-seen order.
    """
    if not value:
        return ()
    relations = []
    for token in value.split(','):
        relation = token.strip().lower()
        if relation in allowed and relation not in relations:
            relations.append(relation)
    return tuple(relations)


def resolve_relations(populate: Optional[str], default_all: bool = False) -> Tuple[str, ...]:
    """Relations to eager-load; an absent or empty populate means all of them when `default_all`."""
    if not populate and default_all:
        return Student.RELATIONS
    return parse_populate(populate)


@dataclass
class ListQuery:
    """Parsed query string of the student list endpoint"""
    page: int
    limit: int
    sort: str
    populate: Optional[str]
    relations: Tuple[str, ...]

    @classmethod
    def from_args(cls, args, default_limit: int = DEFAULT_LIMIT) -> 'ListQuery':
        populate = args.get('populate') or None
        return cls(
            page=parse_int(args.get('page'), DEFAULT_PAGE),
            limit=parse_int(args.get('limit'), default_limit),
            sort=parse_sort(args.get('sort')),
            populate=populate,
            relations=parse_populate(populate)
        )

    def total_pages(self, total: int) -> int:
        # ceil(total / limit) without floats
        return -(-total // self.limit)
