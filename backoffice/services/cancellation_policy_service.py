import logging

from sqlalchemy.orm import Session

from backoffice.core.exceptions import ConflictException, NotFoundException
from backoffice.models.cancellation_policy import CancellationPolicy, CancellationPolicyRule
from backoffice.models.tenant_context import TenantContext
from backoffice.repositories.cancellation_policy_repository import CancellationPolicyRepository
from backoffice.schemas.cancellation_policy_schemas import (
    CancellationPolicyCreate,
    CancellationPolicyUpdate,
    CancellationRuleInput,
)
from backoffice.services.agency_service import AgencyService
from backoffice.services.cancellation_rules import validate_rules

logger = logging.getLogger(__name__)


def _build_rules(rules: list[CancellationRuleInput]) -> list[CancellationPolicyRule]:
    return [
        CancellationPolicyRule(
            days_before_trip=rule.days_before_trip,
            refund_percentage=rule.refund_percentage,
            display_order=rule.display_order,
        )
        for rule in rules
    ]


class CancellationPolicyService:
    """
    Service for cancellation policies.

    Keeps at most one default policy per agency: making a policy the
    default clears the flag on the agency's other policies.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = CancellationPolicyRepository(db)
        self.agency_service = AgencyService(db)

    def _ensure_name_free(self, name: str, agency_id: int) -> None:
        if self.repo.get_by_name_and_agency(name, agency_id):
            raise ConflictException("Cancellation policy name already in use in this agency")

    def create_policy(
        self, agency_id: int, data: CancellationPolicyCreate, tenant: TenantContext
    ) -> CancellationPolicy:
        self.agency_service.get_agency(agency_id, tenant)
        validate_rules(data.rules)
        self._ensure_name_free(data.name, agency_id)

        if data.is_default:
            self.repo.unset_defaults(agency_id)

        policy = CancellationPolicy(
            agency_id=agency_id,
            name=data.name,
            description=data.description,
            is_default=data.is_default,
            rules=_build_rules(data.rules),
        )
        policy = self.repo.create(policy)
        logger.info("Created cancellation policy %s for agency %s", policy.id, agency_id)
        return policy

    def list_policies(self, agency_id: int, tenant: TenantContext) -> list[CancellationPolicy]:
        self.agency_service.get_agency(agency_id, tenant)
        return self.repo.get_by_agency(agency_id)

    def get_default_policy(self, agency_id: int, tenant: TenantContext) -> CancellationPolicy:
        self.agency_service.get_agency(agency_id, tenant)
        policy = self.repo.get_default(agency_id)
        if not policy:
            raise NotFoundException("No default cancellation policy for this agency")
        return policy

    def get_policy(self, agency_id: int, policy_id: int, tenant: TenantContext) -> CancellationPolicy:
        self.agency_service.get_agency(agency_id, tenant)
        policy = self.repo.get_by_id_and_agency(policy_id, agency_id)
        if not policy:
            raise NotFoundException("Cancellation policy not found in this agency")
        return policy

    def update_policy(
        self,
        agency_id: int,
        policy_id: int,
        data: CancellationPolicyUpdate,
        tenant: TenantContext,
    ) -> CancellationPolicy:
        """Update a policy; a rules list replaces the stored rules as a whole"""
        policy = self.get_policy(agency_id, policy_id, tenant)

        if data.rules is not None:
            validate_rules(data.rules)
        if data.name is not None and data.name != policy.name:
            self._ensure_name_free(data.name, agency_id)

        if data.is_default:
            self.repo.unset_defaults(agency_id, keep_policy_id=policy.id)

        if data.name is not None:
            policy.name = data.name
        if "description" in data.model_fields_set:
            policy.description = data.description
        if data.is_default is not None:
            policy.is_default = data.is_default
        if data.rules is not None:
            # delete-orphan removes the previous rules on flush
            policy.rules = _build_rules(data.rules)

        return self.repo.update(policy)

    def delete_policy(self, agency_id: int, policy_id: int, tenant: TenantContext) -> None:
        """Delete a policy; trips using it are left without one"""
        policy = self.get_policy(agency_id, policy_id, tenant)

        detached = self.repo.detach_from_trips(policy.id)
        if detached:
            logger.info("Detached cancellation policy %s from %d trip(s)", policy_id, detached)

        self.repo.delete(policy)
