from sqlalchemy.orm import Session
from backoffice.models.cancellation_policy import CancellationPolicy
from backoffice.models.trip import Trip


class CancellationPolicyRepository:
    """Repository for CancellationPolicy model operations (rules ride along via cascade)"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_agency(self, agency_id: int) -> list[CancellationPolicy]:
        """Default policy first, then in creation order"""
        return (
            self.db.query(CancellationPolicy)
            .filter(CancellationPolicy.agency_id == agency_id)
            .order_by(CancellationPolicy.is_default.desc(), CancellationPolicy.created_at, CancellationPolicy.id)
            .all()
        )

    def get_by_id_and_agency(self, policy_id: int, agency_id: int) -> CancellationPolicy | None:
        """Get policy ensuring it belongs to agency"""
        return (
            self.db.query(CancellationPolicy)
            .filter(CancellationPolicy.id == policy_id, CancellationPolicy.agency_id == agency_id)
            .first()
        )

    def get_by_name_and_agency(self, name: str, agency_id: int) -> CancellationPolicy | None:
        return (
            self.db.query(CancellationPolicy)
            .filter(CancellationPolicy.name == name, CancellationPolicy.agency_id == agency_id)
            .first()
        )

    def get_default(self, agency_id: int) -> CancellationPolicy | None:
        return (
            self.db.query(CancellationPolicy)
            .filter(CancellationPolicy.agency_id == agency_id, CancellationPolicy.is_default.is_(True))
            .first()
        )

    def unset_defaults(self, agency_id: int, keep_policy_id: int | None = None) -> int:
        """
        Clear is_default on the agency's policies, except keep_policy_id.

        Returns:
            Number of policies changed
        """
        query = self.db.query(CancellationPolicy).filter(
            CancellationPolicy.agency_id == agency_id,
            CancellationPolicy.is_default.is_(True),
        )
        if keep_policy_id is not None:
            query = query.filter(CancellationPolicy.id != keep_policy_id)
        updated = query.update({CancellationPolicy.is_default: False}, synchronize_session="fetch")
        self.db.commit()
        return updated

    def detach_from_trips(self, policy_id: int) -> int:
        """Set cancellation_policy_id to NULL on trips using the policy"""
        updated = (
            self.db.query(Trip)
            .filter(Trip.cancellation_policy_id == policy_id)
            .update({Trip.cancellation_policy_id: None}, synchronize_session="fetch")
        )
        self.db.commit()
        return updated

    def create(self, policy: CancellationPolicy) -> CancellationPolicy:
        self.db.add(policy)
        self.db.commit()
        self.db.refresh(policy)
        return policy

    def update(self, policy: CancellationPolicy) -> CancellationPolicy:
        self.db.commit()
        self.db.refresh(policy)
        return policy

    def delete(self, policy: CancellationPolicy) -> None:
        self.db.delete(policy)
        self.db.commit()
