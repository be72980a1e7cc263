"""Concept type hierarchy and public URL construction.

Concept types form a single-inheritance tree rooted at ``Thing``. Nodes in the
backing store carry some or all of the labels on the path from the root to
their own type; the most specific of them decides both the ``directType`` of
the public representation and which API path the concept lives under.
"""

THINGS_URL_PREFIX = "http://api.ft.com/things/"

_PARENT_TYPES: dict[str, str | None] = {
    "Thing": None,
    "Concept": "Thing",
    "Classification": "Concept",
    "Brand": "Classification",
    "AlphavilleSeries": "Classification",
    "Genre": "Classification",
    "Section": "Classification",
    "SpecialReport": "Classification",
    "Subject": "Classification",
    "Topic": "Concept",
    "Location": "Concept",
    "Person": "Concept",
    "Organisation": "Concept",
    "Company": "Organisation",
    "PublicCompany": "Company",
    "PrivateCompany": "Company",
    "Role": "Thing",
    "BoardRole": "Role",
    "MembershipRole": "Role",
    "Membership": "Concept",
    "FinancialInstrument": "Concept",
}

_TYPE_URIS: dict[str, str] = {
    "Thing": "http://www.ft.com/ontology/core/Thing",
    "Concept": "http://www.ft.com/ontology/concept/Concept",
    "Classification": "http://www.ft.com/ontology/classification/Classification",
    "Brand": "http://www.ft.com/ontology/product/Brand",
    "AlphavilleSeries": "http://www.ft.com/ontology/AlphavilleSeries",
    "Genre": "http://www.ft.com/ontology/Genre",
    "Section": "http://www.ft.com/ontology/Section",
    "SpecialReport": "http://www.ft.com/ontology/SpecialReport",
    "Subject": "http://www.ft.com/ontology/Subject",
    "Topic": "http://www.ft.com/ontology/Topic",
    "Location": "http://www.ft.com/ontology/Location",
    "Person": "http://www.ft.com/ontology/person/Person",
    "Organisation": "http://www.ft.com/ontology/organisation/Organisation",
    "Company": "http://www.ft.com/ontology/company/Company",
    "PublicCompany": "http://www.ft.com/ontology/company/PublicCompany",
    "PrivateCompany": "http://www.ft.com/ontology/company/PrivateCompany",
    "Role": "http://www.ft.com/ontology/organisation/Role",
    "BoardRole": "http://www.ft.com/ontology/BoardRole",
    "MembershipRole": "http://www.ft.com/ontology/MembershipRole",
    "Membership": "http://www.ft.com/ontology/Membership",
    "FinancialInstrument": "http://www.ft.com/ontology/FinancialInstrument",
}

_LABELS_BY_URI: dict[str, str] = {uri: label for label, uri in _TYPE_URIS.items()}

# Nearest ancestor with an entry wins; anything else is served under /things.
_API_PATHS: dict[str, str] = {
    "Brand": "brands",
    "Person": "people",
    "Organisation": "organisations",
    "Membership": "memberships",
    "Role": "roles",
}


class TypeHierarchyError(ValueError):
    """Raised when a set of labels cannot be reduced to one most specific type."""


def _normalize_label(label: str) -> str | None:
    """Map a bare label or a type URI to a known label, or None if unknown."""
    if label in _PARENT_TYPES:
        return label
    return _LABELS_BY_URI.get(label)


def type_chain(label: str) -> list[str]:
    """Return the labels from ``Thing`` down to ``label`` inclusive."""
    if label not in _PARENT_TYPES:
        raise TypeHierarchyError(f"unknown type '{label}'")
    chain: list[str] = []
    current: str | None = label
    while current is not None:
        chain.append(current)
        current = _PARENT_TYPES[current]
    chain.reverse()
    return chain


def known_types(labels: list[str]) -> set[str]:
    """The subset of ``labels`` that name types of the hierarchy, as bare labels."""
    return {normalized for normalized in map(_normalize_label, labels) if normalized}


def most_specific_type(labels: list[str]) -> str:
    """Pick the narrowest known type from an unordered collection of labels.

    Unknown labels are ignored. The known labels must all lie on one line of
    descent; labels from sibling branches are rejected rather than guessed.

    Raises:
        TypeHierarchyError: If no known label is present or the labels fork.
    """
    known = known_types(labels)
    if not known:
        raise TypeHierarchyError(f"no known types in {sorted(labels)}")

    deepest = max(known, key=lambda label: (len(type_chain(label)), label))
    ancestry = set(type_chain(deepest))
    stray = known - ancestry
    if stray:
        raise TypeHierarchyError(
            f"types {sorted(known)} do not form a single hierarchy"
        )
    return deepest


def type_uris(label: str) -> list[str]:
    """Type URIs from broadest to ``label``."""
    return [_TYPE_URIS[t] for t in type_chain(label)]


def type_uri(label: str) -> str:
    return _TYPE_URIS[label]


def is_a(label: str, ancestor: str) -> bool:
    """True if ``label`` is ``ancestor`` or descends from it."""
    return ancestor in type_chain(label)


def id_url(uuid: str) -> str:
    return THINGS_URL_PREFIX + uuid


def api_url(uuid: str, label: str, env: str) -> str:
    """Build the externally addressable API URL for a concept.

    The path segment comes from the closest type in the concept's ancestry
    that has a dedicated API; ``env`` switches between live and test hosts.
    """
    base = "http://test.api.ft.com/" if env == "test" else "http://api.ft.com/"
    path = "things"
    for candidate in reversed(type_chain(label)):
        if candidate in _API_PATHS:
            path = _API_PATHS[candidate]
            break
    return f"{base}{path}/{uuid}"


def strip_id_url(value: str) -> str:
    """Reduce a things/concepts/brands URI to its trailing UUID."""
    return value.rstrip("/").rsplit("/", 1)[-1]
