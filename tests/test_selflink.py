from __future__ import annotations

import pytest

from computeengine.selflink import region_from_self_link, short_name_from_reference, zone_from_self_link

ZONE_LINK = "https://www.googleapis.com/compute/v1/projects/evandbrown17/zones/asia-east1-a"


def test_zone_from_full_self_link() -> None:
    assert short_name_from_reference(ZONE_LINK) == "asia-east1-a"
    assert zone_from_self_link(ZONE_LINK) == "asia-east1-a"


def test_short_name_is_returned_verbatim() -> None:
    assert short_name_from_reference("asia-east1-a") == "asia-east1-a"


def test_region_from_self_link() -> None:
    link = "https://www.googleapis.com/compute/v1/projects/evandbrown17/regions/us-central1"
    assert region_from_self_link(link) == "us-central1"


@pytest.mark.parametrize(
    "reference",
    [
        ZONE_LINK,
        "asia-east1-a",
        "projects/p/regions/us-west1",
        "",
        "trailing/",
    ],
)
def test_parsing_is_idempotent(reference: str) -> None:
    once = short_name_from_reference(reference)
    assert short_name_from_reference(once) == once


def test_empty_and_trailing_slash_return_empty_string() -> None:
    assert short_name_from_reference("") == ""
    assert short_name_from_reference("zones/") == ""
