"""Unit tests for marina.model.boat — Boat, placement variants and helpers."""
from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from marina.model.boat import (
    MAX_LICENSE_LENGTH,
    MAX_NAME_LENGTH,
    Boat,
    Land,
    PlacementKind,
    Slip,
    Storage,
    Trailer,
    describe_placement,
    name_key,
)


# ===========================================================================
# PlacementKind
# ===========================================================================


class TestPlacementKind:
    def test_closed_set_of_four_kinds(self) -> None:
        assert [k.wire_name for k in PlacementKind] == ["slip", "land", "trailer", "storage"]

    @pytest.mark.parametrize(
        ("placement", "kind"),
        [
            (Slip(number=1), PlacementKind.SLIP),
            (Land(bay="A"), PlacementKind.LAND),
            (Trailer(license="ABC"), PlacementKind.TRAILER),
            (Storage(number=2), PlacementKind.STORAGE),
        ],
    )
    def test_each_variant_carries_its_tag(self, placement: object, kind: PlacementKind) -> None:
        assert placement.kind is kind  # type: ignore[attr-defined]


# ===========================================================================
# Placement variants
# ===========================================================================


class TestPlacementVariants:
    def test_variants_are_frozen(self) -> None:
        slip = Slip(number=3)
        with pytest.raises((FrozenInstanceError, AttributeError)):
            slip.number = 4  # type: ignore[misc]

    def test_variants_compare_by_value(self) -> None:
        assert Land(bay="B") == Land(bay="B")
        assert Slip(number=1) != Storage(number=1)

    def test_land_bay_must_be_one_character(self) -> None:
        with pytest.raises(ValueError, match="single character"):
            Land(bay="AB")
        with pytest.raises(ValueError):
            Land(bay="")

    def test_trailer_license_length_limit(self) -> None:
        Trailer(license="X" * MAX_LICENSE_LENGTH)
        with pytest.raises(ValueError, match="at most 19"):
            Trailer(license="X" * (MAX_LICENSE_LENGTH + 1))

    @pytest.mark.parametrize("bay", [" ", ",", "\n"])
    def test_land_bay_must_be_printable_field_text(self, bay: str) -> None:
        with pytest.raises(ValueError, match="Land bay"):
            Land(bay=bay)

    @pytest.mark.parametrize("tag", [" TX1234", "TX1234 ", "TX,1234", "TX\n1234"])
    def test_trailer_license_must_survive_a_data_line(self, tag: str) -> None:
        with pytest.raises(ValueError, match="Trailer license"):
            Trailer(license=tag)


class TestDescribePlacement:
    def test_slip_shows_number(self) -> None:
        assert describe_placement(Slip(number=21)) == "#21"

    def test_storage_shows_number(self) -> None:
        assert describe_placement(Storage(number=5)) == "#5"

    def test_land_shows_bay(self) -> None:
        assert describe_placement(Land(bay="Q")) == "Q"

    def test_trailer_shows_license(self) -> None:
        assert describe_placement(Trailer(license="TX1234")) == "TX1234"

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(TypeError):
            describe_placement("slip 4")  # type: ignore[arg-type]


# ===========================================================================
# Boat
# ===========================================================================


class TestBoat:
    def test_kind_follows_placement(self, sea_lion: Boat) -> None:
        assert sea_lion.kind is PlacementKind.SLIP

    def test_amount_owed_defaults_to_zero(self) -> None:
        boat = Boat(name="Skiff", length=12, placement=Slip(number=1))
        assert boat.amount_owed == 0.0

    def test_amount_owed_is_mutable(self, sea_lion: Boat) -> None:
        sea_lion.amount_owed = 5.0
        assert sea_lion.amount_owed == 5.0

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            Boat(name="", length=10, placement=Slip(number=1))

    def test_name_length_limit(self) -> None:
        Boat(name="N" * MAX_NAME_LENGTH, length=10, placement=Slip(number=1))
        with pytest.raises(ValueError, match="at most 127"):
            Boat(name="N" * (MAX_NAME_LENGTH + 1), length=10, placement=Slip(number=1))

    def test_negative_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            Boat(name="Skiff", length=-1, placement=Slip(number=1))

    @pytest.mark.parametrize("name", [" Sea Lion", "Sea Lion ", "Sea, Lion", "Sea\rLion"])
    def test_name_must_survive_a_data_line(self, name: str) -> None:
        with pytest.raises(ValueError, match="Boat name"):
            Boat(name=name, length=10, placement=Slip(number=1))

    def test_inner_spaces_in_name_allowed(self) -> None:
        assert Boat(name="Sea  Lion", length=10, placement=Slip(number=1)).name == "Sea  Lion"

    @pytest.mark.parametrize("length", [float("inf"), float("nan")])
    def test_non_finite_length_rejected(self, length: float) -> None:
        with pytest.raises(ValueError, match="finite"):
            Boat(name="Skiff", length=length, placement=Slip(number=1))

    def test_non_finite_amount_owed_rejected(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            Boat(name="Skiff", length=10, placement=Slip(number=1), amount_owed=float("nan"))

    def test_unknown_placement_rejected(self) -> None:
        with pytest.raises(TypeError):
            Boat(name="Skiff", length=10, placement="dock")  # type: ignore[arg-type]

    def test_key_is_case_insensitive(self) -> None:
        a = Boat(name="Sea Lion", length=1, placement=Slip(number=1))
        b = Boat(name="SEA LION", length=1, placement=Slip(number=1))
        assert a.key == b.key == name_key("sea lion")
