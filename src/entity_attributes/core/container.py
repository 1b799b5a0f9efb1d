"""Per-entity attribute containers."""

from collections.abc import Iterable

import structlog

from .catalog import AttributeCatalog, AttributeKind
from .instance import AttributeInstance
from .resolver import resolve_value

logger = structlog.get_logger(__name__)


class MissingAttributeInstanceError(LookupError):
    """Raised when an entity is queried for an attribute it was never assigned."""

    def __init__(self, entity_id: str, kind_id: str) -> None:
        super().__init__(f"Entity '{entity_id}' has no attribute '{kind_id}'")
        self.entity_id = entity_id
        self.kind_id = kind_id


class AttributeContainer:
    """
    Owns the attribute instances of a single entity.

    The container is given the set of kinds the entity supports. Instances are
    created lazily the first time a supported kind is accessed and are never
    shared between entities.
    """

    def __init__(
        self,
        catalog: AttributeCatalog,
        supported: Iterable[str] | None = None,
        entity_id: str = "",
    ) -> None:
        """
        Create a container.

        Args:
            catalog: Catalog the kinds are looked up in
            supported: Kind ids this entity has; None means every catalog kind
            entity_id: Identifier of the owning entity, for logging and errors

        Raises:
            UnknownAttributeError: If a supported id is not in the catalog
        """
        self.catalog = catalog
        self.entity_id = entity_id
        if supported is None:
            self._supported = set(catalog.ids)
        else:
            self._supported = {catalog.lookup(kind_id).id for kind_id in supported}
        self._instances: dict[str, AttributeInstance] = {}

    def supports(self, kind_id: str) -> bool:
        kind = self.catalog.get(kind_id)
        return kind is not None and kind.id in self._supported

    def add_attribute(self, kind_id: str) -> AttributeInstance:
        """Give the entity an attribute it did not support before."""
        kind = self.catalog.lookup(kind_id)
        self._supported.add(kind.id)
        return self._instance_for(kind)

    def get(self, kind_id: str) -> AttributeInstance | None:
        """
        Get the instance for a kind, creating it on first access.

        Returns:
            The instance, or None if the entity does not have this attribute

        Raises:
            UnknownAttributeError: If the kind id is not in the catalog
        """
        kind = self.catalog.lookup(kind_id)
        if kind.id not in self._supported:
            return None
        return self._instance_for(kind)

    def require(self, kind_id: str) -> AttributeInstance:
        """
        Get the instance for a kind.

        Raises:
            UnknownAttributeError: If the kind id is not in the catalog
            MissingAttributeInstanceError: If the entity does not have this attribute
        """
        instance = self.get(kind_id)
        if instance is None:
            raise MissingAttributeInstanceError(self.entity_id, kind_id)
        return instance

    def get_value(self, kind_id: str) -> float:
        return resolve_value(self.require(kind_id))

    def get_base_value(self, kind_id: str) -> float:
        return self.require(kind_id).base_value

    def _instance_for(self, kind: AttributeKind) -> AttributeInstance:
        instance = self._instances.get(kind.id)
        if instance is None:
            instance = AttributeInstance(kind)
            self._instances[kind.id] = instance
            logger.debug(
                "attribute_instance_created",
                entity_id=self.entity_id,
                attribute=kind.id,
            )
        return instance

    @property
    def instances(self) -> list[AttributeInstance]:
        """Instances created so far."""
        return list(self._instances.values())

    def clear(self) -> None:
        """Drop every instance; called when the owning entity is destroyed."""
        self._instances.clear()
        logger.debug("attribute_container_cleared", entity_id=self.entity_id)
