"""
Data models for query composition.

This module contains the value types used to describe query fragments,
the boolean role each fragment plays, and the compound query they are
composed into.
"""

import copy
import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union


class BooleanRole(Enum):
    """Boolean clause a directive is placed in."""
    MUST = "must"
    SHOULD = "should"
    MUST_NOT = "must_not"


class QueryExpression:
    """
    A single backend query fragment.

    Expressions are mutable until they are composed, so that factory
    callbacks can set options the factory signature does not cover.
    Field-scoped kinds render as ``{kind: {field: params}}``, the rest
    as ``{kind: params}``.
    """

    def __init__(
        self,
        kind: str,
        field: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the expression.

        Args:
            kind: Query DSL kind, e.g. ``match`` or ``range``
            field: Optional field the parameters are scoped to
            params: Initial query parameters
        """
        self.kind = kind
        self.field = field
        self.params: Dict[str, Any] = dict(params or {})

    def set_param(self, key: str, value: Any) -> "QueryExpression":
        """Set a single query parameter."""
        self.params[key] = value
        return self

    def set_params(self, params: Dict[str, Any]) -> "QueryExpression":
        """Merge several query parameters."""
        self.params.update(params)
        return self

    def get_param(self, key: str, default: Any = None) -> Any:
        """Return a query parameter, or ``default`` when unset."""
        return self.params.get(key, default)

    def has_param(self, key: str) -> bool:
        return key in self.params

    def set_boost(self, boost: float) -> "QueryExpression":
        return self.set_param("boost", boost)

    def references(self, field_name: str) -> bool:
        """Check whether the expression targets the given field."""
        if self.field == field_name:
            return True
        return self.field is None and field_name in self.params

    def to_dict(self) -> Dict[str, Any]:
        """Render the expression as query DSL."""
        params = copy.deepcopy(self.params)
        if self.field is None:
            return {self.kind: params}
        return {self.kind: {self.field: params}}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryExpression):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        # Follows the rendered query, so it changes if params are mutated
        return hash(json.dumps(self.to_dict(), sort_keys=True, default=str))

    def __repr__(self) -> str:
        return f"QueryExpression({self.to_dict()!r})"


ExpressionCallback = Callable[[QueryExpression], Any]


@dataclass(frozen=True)
class QueryDirective:
    """
    One query fragment tagged with a boolean role.

    The role decides which bucket of the compound query the expression
    lands in. Directives are immutable; the re-tagging helpers return a
    new directive sharing the same expression.
    """
    expression: QueryExpression
    role: Union[BooleanRole, str] = BooleanRole.MUST

    def must(self) -> "QueryDirective":
        return replace(self, role=BooleanRole.MUST)

    def should(self) -> "QueryDirective":
        return replace(self, role=BooleanRole.SHOULD)

    def must_not(self) -> "QueryDirective":
        return replace(self, role=BooleanRole.MUST_NOT)

    def with_role(self, role: Union[BooleanRole, str]) -> "QueryDirective":
        return replace(self, role=role)


MATCH_ALL: Dict[str, Any] = {"match_all": {}}
SCORE_SORT = "_score"


@dataclass
class CompoundQuery:
    """
    The boolean combination of all directives for one search call.

    A compound query built from no directives is the match-everything
    query and carries no sort.
    """
    must_clauses: List[QueryExpression] = field(default_factory=list)
    should_clauses: List[QueryExpression] = field(default_factory=list)
    must_not_clauses: List[QueryExpression] = field(default_factory=list)
    sort: List[Any] = field(default_factory=list)
    match_all: bool = False

    @classmethod
    def everything(cls) -> "CompoundQuery":
        """Create the match-everything query."""
        return cls(match_all=True)

    def clause_count(self) -> int:
        return (
            len(self.must_clauses)
            + len(self.should_clauses)
            + len(self.must_not_clauses)
        )

    def query_dict(self) -> Dict[str, Any]:
        """Render the ``query`` part of the request body."""
        if self.match_all:
            return copy.deepcopy(MATCH_ALL)

        bool_query: Dict[str, Any] = {}
        if self.must_clauses:
            bool_query["must"] = [e.to_dict() for e in self.must_clauses]
        if self.should_clauses:
            bool_query["should"] = [e.to_dict() for e in self.should_clauses]
        if self.must_not_clauses:
            bool_query["must_not"] = [e.to_dict() for e in self.must_not_clauses]
        return {"bool": bool_query}

    def to_dict(self) -> Dict[str, Any]:
        """Render the full request body."""
        body: Dict[str, Any] = {"query": self.query_dict()}
        if self.sort:
            body["sort"] = list(self.sort)
            body["track_scores"] = True
        return body
