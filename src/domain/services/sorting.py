"""Parsing of client-supplied ordering strings.

Grammar (after trimming and lower-casing the whole input):

    order_by := clause ("," clause)*
    clause   := field [(":" | " ") direction]
    direction:= "asc" | "desc"

The colon separator wins when a clause contains one.  When the input is
empty the resource's default descriptor ("name asc") is used instead.
"""

from __future__ import annotations

import logging

from src.domain.exceptions import SortSyntaxError
from src.domain.models.enums import SortDirection
from src.domain.models.sorting import SortSpec

logger = logging.getLogger(__name__)

# A bare field name that starts a spec sorts ascending; one chained onto an
# existing spec sorts descending.
FIRST_BARE_FIELD_DIRECTION = SortDirection.ASC
CHAINED_BARE_FIELD_DIRECTION = SortDirection.DESC


def parse_sort(order_by: str | None, default_order_by: str | None = None) -> SortSpec | None:
    """Convert an orderBy query value into a SortSpec.

    Returns None when neither order_by nor a usable default is given
    (the query stays unsorted).

    Raises:
        SortSyntaxError: a clause names a direction other than asc/desc.
    """
    text = (order_by or "").strip().lower()
    if not text:
        return _default_sort(default_order_by)

    spec: SortSpec | None = None
    for clause in text.split(","):
        clause = clause.strip()
        if clause:
            spec = _append_clause(spec, clause)
    return spec if spec is not None else _default_sort(default_order_by)


def _append_clause(spec: SortSpec | None, clause: str) -> SortSpec:
    parts = clause.split(":") if ":" in clause else clause.split()
    field = parts[0].strip()
    if not field:
        raise SortSyntaxError(f"sort is not usable: missing field in {clause!r}")

    if len(parts) > 1 and parts[1].strip():
        direction = SortDirection.from_token(parts[1])
        if direction is None:
            raise SortSyntaxError(f"sort is not usable: {parts[1].strip()!r}")
    elif spec is None:
        direction = FIRST_BARE_FIELD_DIRECTION
    else:
        direction = CHAINED_BARE_FIELD_DIRECTION

    return SortSpec.by(field, direction) if spec is None else spec.then(field, direction)


def _default_sort(default_order_by: str | None) -> SortSpec | None:
    tokens = (default_order_by or "").strip().lower().split()
    if not tokens:
        return None

    direction = SortDirection.from_token(tokens[-1]) if len(tokens) > 1 else None
    if direction is None:
        logger.debug("Default order %r has no direction; leaving unsorted", default_order_by)
        return None
    return SortSpec.by(" ".join(tokens[:-1]), direction)
