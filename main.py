# main.py
"""
Composition root: builds a fresh pair of registries from settings.
"""
from dataclasses import dataclass

from config import settings as default_settings
from core.log import configure_logging
from registries.assets.registry import AssetRegistry
from registries.lessees.registry import LesseeVerificationRegistry


@dataclass
class Registries:
    assets: AssetRegistry
    lessees: LesseeVerificationRegistry

    def reset(self) -> None:
        """Reinitialise both registries, e.g. between test runs."""
        self.assets.reset()
        self.lessees.reset()


def build_registries(settings=None) -> Registries:
    """
    Configure logging and create independent asset and lessee registries.

    Args:
        settings: Settings object to use; defaults to the one selected by MODE
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)
    return Registries(
        assets=AssetRegistry(),
        lessees=LesseeVerificationRegistry(contract_owner=settings.CONTRACT_OWNER),
    )
