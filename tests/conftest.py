"""Pytest configuration and shared fixtures for all tests.

This module provides fixtures for:
- Settings isolated from the environment and `.env`
- Raw brand bundles mirroring what the backing stores return
- Concepts API documents for the upstream variant
"""

from typing import Any

import pytest

from public_brands_api.core.settings import Settings
from public_brands_api.features.brands.models import RawBrandBundle, RawConcept
from public_brands_api.features.brands.services import BrandTransformer
from tests.utils.brands import (
    BRAND_LABELS,
    BRAND_TYPE_URI,
    BRAND_UUID,
    CHILD_UUID,
    PARENT_UUID,
    PERSON_TYPE_URI,
    PERSON_UUID,
    SECOND_CHILD_UUID,
    brands_url,
    related_concept_entry,
    things_url,
)


@pytest.fixture
def test_settings() -> Settings:
    """Provide settings that ignore the process environment's .env file."""
    return Settings(_env_file=None, env="local", cache_duration="1h")  # pyright: ignore[reportCallIssue]


@pytest.fixture
def transformer() -> BrandTransformer:
    return BrandTransformer(env="local")


@pytest.fixture
def complete_bundle() -> RawBrandBundle:
    """A brand with a parent, two children and every optional field."""
    return RawBrandBundle(
        id=BRAND_UUID,
        pref_label="Lex",
        types=BRAND_LABELS,
        description_xml="One brand to rule them all",
        strapline="Something",
        image_url="www.imgur.com",
        parents=[
            RawConcept(id=PARENT_UUID, pref_label="Old father Lex", types=BRAND_LABELS)
        ],
        children=[
            RawConcept(id=CHILD_UUID, pref_label="Little Lex", types=BRAND_LABELS),
            RawConcept(id=SECOND_CHILD_UUID, pref_label="Baby Lex", types=BRAND_LABELS),
        ],
    )


@pytest.fixture
def complete_brand_concept() -> dict[str, Any]:
    """The concepts API document for the complete brand."""
    return {
        "id": things_url(BRAND_UUID),
        "apiUrl": brands_url(BRAND_UUID),
        "prefLabel": "Lex",
        "type": BRAND_TYPE_URI,
        "imageUrl": "www.imgur.com",
        "description": "One brand to rule them all",
        "strapline": "Something",
        "broaderConcepts": [
            related_concept_entry(PARENT_UUID, "Old father Lex", BRAND_TYPE_URI),
        ],
        "narrowerConcepts": [
            related_concept_entry(CHILD_UUID, "Little Lex", BRAND_TYPE_URI),
            related_concept_entry(SECOND_CHILD_UUID, "Baby Lex", BRAND_TYPE_URI),
        ],
    }


@pytest.fixture
def person_concept() -> dict[str, Any]:
    return {
        "id": things_url(PERSON_UUID),
        "apiUrl": f"http://api.ft.com/people/{PERSON_UUID}",
        "type": PERSON_TYPE_URI,
        "prefLabel": "Not a brand",
    }
