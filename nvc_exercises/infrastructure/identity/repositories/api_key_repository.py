"""Repository for ApiKey domain entities."""

import logging
from datetime import datetime

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from nvc_exercises.domain.common.value_objects import ApiKeyId
from nvc_exercises.domain.identity.entities import ApiKey
from nvc_exercises.domain.identity.value_objects import ApiKeyDigest, ApiKeyStatus
from nvc_exercises.infrastructure.identity.mappers import ApiKeyMapper
from nvc_exercises.models import ApiKey as ApiKeyORM

logger = logging.getLogger(__name__)

# Statuses a key may be revoked from
_REVOCABLE_STATUSES = [
    status.value for status in ApiKeyStatus if status.can_transition_to(ApiKeyStatus.REVOKED)
]


class ApiKeyRepository:
    """Repository for ApiKey domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ApiKeyMapper()

    def find_active_by_digest(self, key_digest: ApiKeyDigest) -> ApiKey | None:
        """
        Find an active key by digest.

        Digest and status are matched by the same query.

        Args:
            key_digest: Digest of the presented key

        Returns:
            ApiKey entity if an active key matches, None otherwise
        """
        stmt = select(ApiKeyORM).where(
            ApiKeyORM.key_hash == key_digest.value,
            ApiKeyORM.status == ApiKeyStatus.ACTIVE.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_id(self, api_key_id: ApiKeyId) -> ApiKey | None:
        """
        Find a key by ID regardless of status.

        Args:
            api_key_id: The key ID

        Returns:
            ApiKey entity if found, None otherwise
        """
        orm_model = self.db.get(ApiKeyORM, api_key_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[ApiKey]:
        """
        Get all keys.

        Returns:
            List of ApiKey entities ordered by issued_at DESC
        """
        stmt = select(ApiKeyORM).order_by(ApiKeyORM.issued_at.desc(), ApiKeyORM.id.desc())
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def add(self, api_key: ApiKey) -> ApiKey:
        """
        Persist a newly issued key.

        Args:
            api_key: Unsaved ApiKey entity

        Returns:
            Saved entity with database-generated ID
        """
        orm_model = self.mapper.to_orm(api_key)
        try:
            self.db.add(orm_model)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(orm_model)
        logger.info(f"Created API key {orm_model.id}")
        return self.mapper.to_domain(orm_model)

    def touch_last_used(self, api_key_id: ApiKeyId, used_at: datetime) -> None:
        """
        Record a successful validation time.

        Args:
            api_key_id: The key ID
            used_at: Validation timestamp
        """
        stmt = update(ApiKeyORM).where(ApiKeyORM.id == api_key_id.value).values(last_used_at=used_at)
        try:
            self.db.execute(stmt)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def revoke(self, api_key_id: ApiKeyId) -> bool:
        """
        Move an active key to revoked in a single conditioned update.

        Args:
            api_key_id: The key ID

        Returns:
            True if a row changed, False if the key was already revoked or unknown
        """
        stmt = (
            update(ApiKeyORM)
            .where(
                ApiKeyORM.id == api_key_id.value,
                ApiKeyORM.status.in_(_REVOCABLE_STATUSES),
            )
            .values(status=ApiKeyStatus.REVOKED.value)
        )
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return result.rowcount > 0  # type: ignore[attr-defined]
