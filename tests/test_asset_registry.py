import pytest
from pydantic import ValidationError

from core.result import ErrorKind


def register_excavator(registry, caller):
    return registry.register_asset(caller, "Excavator", "EX200", "Caterpillar", 2022, "CAT123456")


def test_register_asset(asset_registry, owner):
    result = register_excavator(asset_registry, owner)
    assert result.type == "ok"
    assert result.value == 1

    asset = asset_registry.get_asset(1)
    assert asset is not None
    assert asset.name == "Excavator"
    assert asset.model == "EX200"
    assert asset.manufacturer == "Caterpillar"
    assert asset.year == 2022
    assert asset.serial_number == "CAT123456"
    assert asset.owner == owner
    assert asset.available is True


def test_ids_follow_registration_order(asset_registry, owner, outsider):
    ids = [
        asset_registry.register_asset(caller, f"Asset {n}", "M", "Maker", 2020, f"SN{n}").value
        for n, caller in enumerate([owner, outsider, owner, outsider], start=1)
    ]
    assert ids == [1, 2, 3, 4]
    assert asset_registry.last_asset_id == 4
    assert asset_registry.get_asset(2).owner == outsider


def test_get_unknown_asset_returns_none(asset_registry):
    assert asset_registry.get_asset(999) is None


def test_update_asset_availability(asset_registry, owner):
    asset_registry.register_asset(owner, "Bulldozer", "BD100", "Komatsu", 2021, "KOM789012")

    result = asset_registry.set_asset_availability(owner, 1, False)
    assert result.is_ok
    assert result.value is True
    assert asset_registry.get_asset(1).available is False

    asset_registry.set_asset_availability(owner, 1, True)
    assert asset_registry.get_asset(1).available is True


def test_transfer_asset_ownership(asset_registry, owner, verifier):
    asset_registry.register_asset(owner, "Crane", "CR300", "Liebherr", 2023, "LIE345678")

    result = asset_registry.transfer_asset(owner, 1, verifier)
    assert result.is_ok
    assert asset_registry.get_asset(1).owner == verifier

    # The previous owner has lost control of the asset
    result = asset_registry.set_asset_availability(owner, 1, False)
    assert result.is_err
    assert result.code == 2

    assert asset_registry.set_asset_availability(verifier, 1, False).is_ok


def test_update_unknown_asset_fails(asset_registry, owner):
    result = asset_registry.set_asset_availability(owner, 999, False)
    assert result.type == "err"
    assert result.kind == ErrorKind.NOT_FOUND
    assert result.code == 1


def test_transfer_unknown_asset_fails(asset_registry, owner, outsider):
    result = asset_registry.transfer_asset(owner, 1, outsider)
    assert result.kind == ErrorKind.NOT_FOUND
    assert result.code == 1


def test_transfer_asset_not_owner(asset_registry, owner, outsider):
    asset_registry.register_asset(owner, "Forklift", "FL50", "Toyota", 2020, "TOY567890")

    result = asset_registry.transfer_asset(outsider, 1, outsider)
    assert result.type == "err"
    assert result.kind == ErrorKind.UNAUTHORIZED
    assert result.code == 2
    assert asset_registry.get_asset(1).owner == owner


def test_availability_not_owner_leaves_asset_untouched(asset_registry, owner, outsider):
    register_excavator(asset_registry, owner)

    result = asset_registry.set_asset_availability(outsider, 1, False)
    assert result.code == 2
    assert asset_registry.get_asset(1).available is True


def test_transfer_accepts_any_identity(asset_registry, owner):
    register_excavator(asset_registry, owner)

    assert asset_registry.transfer_asset(owner, 1, owner).is_ok
    assert asset_registry.transfer_asset(owner, 1, "not-a-principal").is_ok
    assert asset_registry.get_asset(1).owner == "not-a-principal"


def test_returned_asset_is_a_copy(asset_registry, owner, outsider):
    register_excavator(asset_registry, owner)

    asset = asset_registry.get_asset(1)
    asset.owner = outsider
    asset.available = False

    stored = asset_registry.get_asset(1)
    assert stored.owner == owner
    assert stored.available is True


def test_list_assets_filters(asset_registry, owner, outsider):
    register_excavator(asset_registry, owner)
    asset_registry.register_asset(outsider, "Crane", "CR300", "Liebherr", 2023, "LIE345678")
    asset_registry.register_asset(owner, "Forklift", "FL50", "Toyota", 2020, "TOY567890")
    asset_registry.set_asset_availability(owner, 3, False)

    assert [a.id for a in asset_registry.list_assets()] == [1, 2, 3]
    assert [a.id for a in asset_registry.list_assets(owner=owner)] == [1, 3]
    assert [a.id for a in asset_registry.list_assets(available=False)] == [3]
    assert [a.id for a in asset_registry.list_assets(owner=owner, available=True)] == [1]


def test_reset_restarts_ids(asset_registry, owner):
    register_excavator(asset_registry, owner)
    register_excavator(asset_registry, owner)

    asset_registry.reset()
    assert asset_registry.get_asset(1) is None
    assert asset_registry.last_asset_id == 0
    assert register_excavator(asset_registry, owner).value == 1


def test_register_asset_rejects_bad_year(asset_registry, owner):
    register_excavator(asset_registry, owner)

    with pytest.raises(ValidationError):
        asset_registry.register_asset(owner, "Crane", "CR300", "Liebherr", "next year", "LIE345678")

    assert asset_registry.last_asset_id == 1
    assert register_excavator(asset_registry, owner).value == 2


def test_register_asset_rejects_missing_caller(asset_registry, owner):
    with pytest.raises(ValidationError):
        register_excavator(asset_registry, None)

    assert asset_registry.last_asset_id == 0
    assert asset_registry.get_asset(1) is None
    assert register_excavator(asset_registry, owner).value == 1
