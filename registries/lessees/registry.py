# registries/lessees/registry.py
"""
Lessee verification registry.

Roles:
- Contract owner: fixed at construction, the only identity that may add verifiers
- Verifier: may mark any registered company as verified while active
- Admin: whoever registered a company (recorded, grants no extra rights)

Error codes keep their historical numbering, so code 1 is reported both when a
non-owner adds a verifier and when a caller without a verifier record tries to
verify. Use ``Err.kind`` to tell failures apart.
"""
import logging

from core.arena import Arena
from core.principal import Principal, same_principal
from core.result import Err, ErrorKind, Ok, Result

from .models import Company, CompanyCreate, Verifier

logger = logging.getLogger(__name__)

ERR_NOT_CONTRACT_OWNER = 1
ERR_NOT_VERIFIER = 1
ERR_INACTIVE_VERIFIER = 2
ERR_COMPANY_NOT_FOUND = 3


class LesseeVerificationRegistry:
    def __init__(self, contract_owner: Principal | None = None) -> None:
        if contract_owner is None:
            from config import settings
            contract_owner = settings.CONTRACT_OWNER
        self._contract_owner = contract_owner
        self._companies: Arena[Company] = Arena()
        self._verifiers: dict[Principal, Verifier] = {}

    @property
    def contract_owner(self) -> Principal:
        return self._contract_owner

    # ---------- Writes ----------

    def register_company(
        self,
        caller: Principal,
        name: str,
        address: str,
        license_number: str,
    ) -> Ok:
        """Register an unverified company with the caller as its admin."""
        payload = CompanyCreate(name=name, address=address, license_number=license_number)
        company = Company(
            id=self._companies.last_id + 1,
            verified=False,
            admin=caller,
            **payload.model_dump(),
        )
        company_id = self._companies.insert(company)
        logger.info("Registered company %s (%s) by %s", company_id, company.license_number, caller)
        return Ok(value=company_id)

    def add_verifier(
        self,
        caller: Principal,
        verifier: Principal,
        active: bool = True,
    ) -> Result:
        """
        Contract owner only: create or overwrite a verifier record.

        Args:
            caller: Identity invoking the operation
            verifier: Identity being authorised
            active: Stored on the record; pass False to switch an existing
                verifier off

        Returns:
            Ok(True), or Err UNAUTHORIZED (code 1) for any other caller
        """
        if not same_principal(caller, self._contract_owner):
            logger.warning("%s tried to add verifier %s without owner rights", caller, verifier)
            return Err(kind=ErrorKind.UNAUTHORIZED, code=ERR_NOT_CONTRACT_OWNER)

        self._verifiers[verifier] = Verifier(principal=verifier, active=active)
        logger.info("Verifier %s set (active=%s)", verifier, active)
        return Ok(value=True)

    def verify_company(self, caller: Principal, company_id: int) -> Result:
        """
        Active verifiers only: mark a company as verified.

        Checks run in order: verifier record exists (code 1), verifier is
        active (code 2), company exists (code 3). Verifying an already
        verified company succeeds again.
        """
        record = self._verifiers.get(caller)
        if record is None:
            logger.warning("%s is not a verifier", caller)
            return Err(kind=ErrorKind.UNAUTHORIZED, code=ERR_NOT_VERIFIER)
        if not record.active:
            logger.warning("Verifier %s is inactive", caller)
            return Err(kind=ErrorKind.INACTIVE_VERIFIER, code=ERR_INACTIVE_VERIFIER)

        company = self._companies.get(company_id)
        if company is None:
            logger.warning("Company %s not found", company_id)
            return Err(kind=ErrorKind.NOT_FOUND, code=ERR_COMPANY_NOT_FOUND)

        self._companies.replace(company_id, company.model_copy(update={"verified": True}))
        logger.info("Company %s verified by %s", company_id, caller)
        return Ok(value=True)

    def reset(self) -> None:
        """Forget all companies and verifiers. The contract owner is kept."""
        self._companies.reset()
        self._verifiers.clear()

    # ---------- Reads ----------

    def get_company(self, company_id: int) -> Company | None:
        company = self._companies.get(company_id)
        return company.model_copy() if company is not None else None

    def is_company_verified(self, company_id: int) -> bool:
        """False for unknown companies, never an error."""
        company = self._companies.get(company_id)
        return company.verified if company is not None else False

    def get_verifier(self, principal: Principal) -> Verifier | None:
        record = self._verifiers.get(principal)
        return record.model_copy() if record is not None else None

    @property
    def last_company_id(self) -> int:
        return self._companies.last_id

    def list_companies(self, verified: bool | None = None) -> list[Company]:
        """Return copies of all companies in id order."""
        return [
            c.model_copy()
            for c in self._companies.values()
            if verified is None or c.verified == verified
        ]
