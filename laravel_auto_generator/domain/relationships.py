"""
Relationship analysis domain logic for Laravel Auto Generator.

Many-to-many relationships are usually declared from both sides
(User belongsToMany Role, Role belongsToMany User) but need exactly one
join table. This module collapses such declarations into pivot descriptors.
"""

import logging
from typing import FrozenSet, Iterable, List, Set

from ..constants import RelationshipTypes
from .models import Model, PivotDescriptor, Relationship
from .naming import default_pivot_table

logger = logging.getLogger(__name__)


def _pair_key(model_name: str, related_model: str) -> FrozenSet[str]:
    """Unordered identity of a model pair."""
    return frozenset((model_name, related_model))


class PivotTableAnalyzer:
    """
    Discovers the pivot tables implied by belongsToMany relationships.

    Tie-break policy: the first declaration of a pair wins. Its explicit
    `pivot_table` (or, when absent, the convention default) names the join
    table; a later declaration of the same pair is ignored, even if it
    overrides the pivot table differently.
    """

    def __init__(self):
        self.discovered: List[PivotDescriptor] = []
        self._seen_pairs: Set[FrozenSet[str]] = set()

    def analyze(self, models: Iterable[Model]) -> List[PivotDescriptor]:
        """
        Scan models (in order) and their relationships (in order).

        Returns:
            One descriptor per unordered model pair, in discovery order
        """
        for model in models:
            for relationship in model.relationships:
                if relationship.type == RelationshipTypes.BELONGS_TO_MANY:
                    self._visit(model, relationship)
        return list(self.discovered)

    def _visit(self, model: Model, relationship: Relationship) -> None:
        key = _pair_key(model.name, relationship.related_model)
        pivot_table = relationship.pivot_table or default_pivot_table(
            model.name, relationship.related_model
        )

        if key in self._seen_pairs:
            existing = next(d for d in self.discovered if _pair_key(*d.models) == key)
            if existing.pivot_table != pivot_table:
                logger.debug(
                    f"Ignored pivot table '{pivot_table}' declared on {model.name}; "
                    f"pair already uses '{existing.pivot_table}'"
                )
            return

        self._seen_pairs.add(key)
        self.discovered.append(
            PivotDescriptor(models=(model.name, relationship.related_model), pivot_table=pivot_table)
        )
        logger.debug(f"Discovered pivot table '{pivot_table}' for {model.name} <-> {relationship.related_model}")


def discover_pivot_tables(models: Iterable[Model]) -> List[PivotDescriptor]:
    """
    Build one PivotDescriptor per many-to-many model pair.

    Args:
        models: All models of the schema

    Returns:
        Descriptors in discovery order, first declaration wins
    """
    return PivotTableAnalyzer().analyze(models)
