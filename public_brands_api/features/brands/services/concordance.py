"""Authority precedence for concorded relationship data.

When several source representations of one canonical concept disagree on
their parents or children, the first authority in the configured precedence
list that has any data for that direction wins outright. Only related concepts
accepted by the precedence's filter count as data.
"""

from collections.abc import Callable, Sequence

from public_brands_api.features.brands.models import RawConcept, RelationshipSlice


class AuthorityPrecedence:
    """Ordered list of authorities consulted when choosing relationship data."""

    def __init__(
        self,
        authorities: Sequence[str],
        accept: Callable[[RawConcept], bool] | None = None,
    ):
        """Initialize the precedence.

        Args:
            authorities: Authority names, most trusted first
            accept: Related concepts rejected by this predicate are discarded
                before an authority's slice is judged; None accepts everything
        """
        self.authorities: tuple[str, ...] = tuple(authorities)
        self.accept: Callable[[RawConcept], bool] | None = accept

    def rank(self, authority: str | None) -> tuple[int, str]:
        """Sort key: listed authorities by position, then the rest by name."""
        name = authority or ""
        try:
            return (self.authorities.index(name), name)
        except ValueError:
            return (len(self.authorities), name)

    def _select(
        self,
        slices: Sequence[RelationshipSlice],
        pick: Callable[[RelationshipSlice], list[RawConcept]],
    ) -> list[RawConcept]:
        for relationship_slice in sorted(slices, key=lambda s: self.rank(s.authority)):
            concepts = [
                c
                for c in pick(relationship_slice)
                if c.id and (self.accept is None or self.accept(c))
            ]
            if concepts:
                return dedupe(concepts)
        return []

    def select_parents(self, slices: Sequence[RelationshipSlice]) -> list[RawConcept]:
        return self._select(slices, lambda s: s.parents)

    def select_children(self, slices: Sequence[RelationshipSlice]) -> list[RawConcept]:
        return self._select(slices, lambda s: s.children)


def dedupe(concepts: Sequence[RawConcept]) -> list[RawConcept]:
    """Keep the first occurrence of each concept id, preserving order."""
    seen: set[str] = set()
    unique: list[RawConcept] = []
    for concept in concepts:
        if concept.id in seen:
            continue
        seen.add(concept.id)
        unique.append(concept)
    return unique
