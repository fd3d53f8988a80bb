"""Mapper for ApiKey ORM ↔ Domain conversion."""

from nvc_exercises.domain.common.value_objects import ApiKeyId
from nvc_exercises.domain.identity.entities import ApiKey
from nvc_exercises.domain.identity.value_objects import ApiKeyDigest, ApiKeyStatus
from nvc_exercises.models import ApiKey as ApiKeyORM


class ApiKeyMapper:
    """Mapper for ApiKey ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ApiKeyORM) -> ApiKey:
        """Convert ORM model to domain entity."""
        return ApiKey.create_with_id(
            id=ApiKeyId(orm_model.id),
            key_digest=ApiKeyDigest(orm_model.key_hash),
            label=orm_model.label,
            status=ApiKeyStatus(orm_model.status),
            issued_at=orm_model.issued_at,
            last_used_at=orm_model.last_used_at,
        )

    def to_orm(self, domain_entity: ApiKey) -> ApiKeyORM:
        """Convert a newly issued domain entity to an ORM model."""
        return ApiKeyORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted() else None,
            key_hash=domain_entity.key_digest.value,
            label=domain_entity.label,
            status=domain_entity.status.value,
            issued_at=domain_entity.issued_at,
            last_used_at=domain_entity.last_used_at,
        )
