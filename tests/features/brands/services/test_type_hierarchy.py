"""Tests for the concept type hierarchy."""

import random

import pytest

from public_brands_api.features.brands.services.type_hierarchy import (
    TypeHierarchyError,
    api_url,
    id_url,
    is_a,
    most_specific_type,
    strip_id_url,
    type_uris,
)
from tests.utils.brands import BRAND_LABELS, BRAND_TYPE_URI, BRAND_TYPE_URIS


def test_most_specific_type_is_stable_for_any_label_order():
    labels = list(BRAND_LABELS)
    rng = random.Random(7)

    for _ in range(20):
        rng.shuffle(labels)
        assert most_specific_type(labels) == "Brand"
        assert type_uris(most_specific_type(labels)) == BRAND_TYPE_URIS


def test_most_specific_type_accepts_type_uris():
    assert most_specific_type([BRAND_TYPE_URI]) == "Brand"


def test_most_specific_type_ignores_unknown_labels():
    assert most_specific_type(["Thing", "UPPIdentifier", "Brand"]) == "Brand"


def test_most_specific_type_with_partial_chain():
    assert most_specific_type(["Concept", "PublicCompany"]) == "PublicCompany"


def test_most_specific_type_rejects_forked_labels():
    with pytest.raises(TypeHierarchyError, match="single hierarchy"):
        _ = most_specific_type(["Thing", "Brand", "Person"])


@pytest.mark.parametrize("labels", [[], ["UPPIdentifier"]])
def test_most_specific_type_requires_a_known_label(labels: list[str]):
    with pytest.raises(TypeHierarchyError):
        _ = most_specific_type(labels)


def test_type_uris_run_broad_to_narrow():
    assert type_uris("Brand") == BRAND_TYPE_URIS
    assert type_uris("Thing") == ["http://www.ft.com/ontology/core/Thing"]


def test_is_a():
    assert is_a("Brand", "Brand")
    assert is_a("Brand", "Classification")
    assert not is_a("Person", "Brand")


@pytest.mark.parametrize(
    ("label", "env", "expected"),
    [
        ("Brand", "local", "http://api.ft.com/brands/abc"),
        ("Brand", "test", "http://test.api.ft.com/brands/abc"),
        ("Person", "prod", "http://api.ft.com/people/abc"),
        ("PublicCompany", "prod", "http://api.ft.com/organisations/abc"),
        ("Subject", "prod", "http://api.ft.com/things/abc"),
        ("Thing", "prod", "http://api.ft.com/things/abc"),
    ],
)
def test_api_url(label: str, env: str, expected: str):
    assert api_url("abc", label, env) == expected


def test_id_url_and_strip_id_url():
    url = id_url("abc")

    assert url == "http://api.ft.com/things/abc"
    assert strip_id_url(url) == "abc"
    assert strip_id_url("http://api.ft.com/concepts/abc/") == "abc"
    assert strip_id_url("abc") == "abc"
