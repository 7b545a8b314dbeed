# registries/assets/registry.py
"""
Asset registration registry.

Tracks equipment assets, who owns them and whether they are available for
lease. Only the current owner of an asset may change its availability or
transfer it.
"""
import logging

from core.arena import Arena
from core.principal import Principal, same_principal
from core.result import Err, ErrorKind, Ok, Result

from .models import Asset, AssetCreate

logger = logging.getLogger(__name__)

# Numeric codes reported with each failure kind
ERR_NOT_FOUND = 1
ERR_UNAUTHORIZED = 2


class AssetRegistry:
    def __init__(self) -> None:
        self._assets: Arena[Asset] = Arena()

    # ---------- Writes ----------

    def register_asset(
        self,
        caller: Principal,
        name: str,
        model: str,
        manufacturer: str,
        year: int,
        serial_number: str,
    ) -> Ok:
        """
        Register a new asset owned by the caller.

        The asset starts out available. Always succeeds.

        Returns:
            Ok with the new asset id (1 for the first asset, then 2, 3, ...)
        """
        payload = AssetCreate(
            name=name,
            model=model,
            manufacturer=manufacturer,
            year=year,
            serial_number=serial_number,
        )
        # Validated before insert: a rejected record leaves the counter untouched
        asset = Asset(
            id=self._assets.last_id + 1,
            owner=caller,
            available=True,
            **payload.model_dump(),
        )
        asset_id = self._assets.insert(asset)
        logger.info("Registered asset %s (%s) for %s", asset_id, asset.serial_number, caller)
        return Ok(value=asset_id)

    def set_asset_availability(
        self,
        caller: Principal,
        asset_id: int,
        available: bool,
    ) -> Result:
        """Owner-only: mark an asset available or unavailable."""
        asset, err = self._owned_asset(caller, asset_id)
        if err is not None:
            return err

        self._assets.replace(asset_id, asset.model_copy(update={"available": available}))
        logger.info("Asset %s availability set to %s", asset_id, available)
        return Ok(value=True)

    def transfer_asset(
        self,
        caller: Principal,
        asset_id: int,
        new_owner: Principal,
    ) -> Result:
        """
        Owner-only: hand an asset over to ``new_owner``.

        ``new_owner`` is taken as-is; it may even be the current owner.
        """
        asset, err = self._owned_asset(caller, asset_id)
        if err is not None:
            return err

        self._assets.replace(asset_id, asset.model_copy(update={"owner": new_owner}))
        logger.info("Asset %s transferred from %s to %s", asset_id, asset.owner, new_owner)
        return Ok(value=True)

    def reset(self) -> None:
        """Drop every asset and restart ids at 1."""
        self._assets.reset()

    # ---------- Reads ----------

    def get_asset(self, asset_id: int) -> Asset | None:
        """Return a copy of the asset, or None if the id is unknown."""
        asset = self._assets.get(asset_id)
        return asset.model_copy() if asset is not None else None

    @property
    def last_asset_id(self) -> int:
        return self._assets.last_id

    def list_assets(
        self,
        owner: Principal | None = None,
        available: bool | None = None,
    ) -> list[Asset]:
        """Return copies of all assets in id order, optionally filtered."""
        results = []
        for asset in self._assets.values():
            if owner is not None and asset.owner != owner:
                continue
            if available is not None and asset.available != available:
                continue
            results.append(asset.model_copy())
        return results

    # ---------- Guards ----------

    def _owned_asset(
        self,
        caller: Principal,
        asset_id: int,
    ) -> tuple[Asset | None, Err | None]:
        asset = self._assets.get(asset_id)
        if asset is None:
            logger.warning("Asset %s not found", asset_id)
            return None, Err(kind=ErrorKind.NOT_FOUND, code=ERR_NOT_FOUND)

        if not same_principal(asset.owner, caller):
            logger.warning("%s is not the owner of asset %s", caller, asset_id)
            return None, Err(kind=ErrorKind.UNAUTHORIZED, code=ERR_UNAUTHORIZED)

        return asset, None
