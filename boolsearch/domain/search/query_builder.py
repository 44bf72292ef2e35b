"""
Compound query composition.

This module turns an ordered sequence of directives into one boolean
compound query. It has no dependency on the backend client.
"""

import logging
from typing import Iterable, Optional, Union

from ...core.entities import (
    BooleanRole,
    CompoundQuery,
    QueryDirective,
    SCORE_SORT
)

logger = logging.getLogger(__name__)


class CompoundQueryBuilder:
    """
    Builds compound queries from directives.

    Each directive is placed in the bucket named by its role. Directives
    whose role is not a known boolean role are dropped rather than
    rejected, as are ``None`` placeholders returned by a disabled driver.
    """

    @staticmethod
    def resolve_role(role: Union[BooleanRole, str, None]) -> Optional[BooleanRole]:
        """
        Map a role tag onto a boolean role.

        Args:
            role: Enum member or its string value

        Returns:
            Optional[BooleanRole]: The role, or None when unrecognized
        """
        if isinstance(role, BooleanRole):
            return role
        try:
            return BooleanRole(role)
        except ValueError:
            return None

    @classmethod
    def build(cls, directives: Iterable[Optional[QueryDirective]]) -> CompoundQuery:
        """
        Build a compound query.

        Args:
            directives: Directives in caller order

        Returns:
            CompoundQuery: Match-all when no directives are given,
                otherwise a bool query sorted by score
        """
        directives = list(directives)
        if not directives:
            return CompoundQuery.everything()

        query = CompoundQuery()
        for directive in directives:
            cls._add_to_bucket(query, directive)

        query.sort.append(SCORE_SORT)
        return query

    @classmethod
    def _add_to_bucket(cls, query: CompoundQuery, directive: Optional[QueryDirective]) -> None:
        """Place a directive's expression in the bucket for its role."""
        if directive is None:
            logger.debug("Skipping empty directive")
            return

        role = cls.resolve_role(directive.role)
        if role is BooleanRole.MUST:
            query.must_clauses.append(directive.expression)
        elif role is BooleanRole.SHOULD:
            query.should_clauses.append(directive.expression)
        elif role is BooleanRole.MUST_NOT:
            query.must_not_clauses.append(directive.expression)
        else:
            # Unknown roles are ignored, never raised
            logger.debug(
                "Ignoring directive with unrecognized role %r", directive.role
            )
