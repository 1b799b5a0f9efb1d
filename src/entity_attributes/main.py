"""Startup entry point for entity attributes."""

import logging
import sys

import structlog

from entity_attributes.config import Settings, get_settings
from entity_attributes.core import (
    AttributeCatalog,
    AttributeKind,
    UnknownAttributeError,
    build_default_catalog,
    define_all,
    load_attribute_definitions,
)

logger = structlog.get_logger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure structlog rendering and level filtering from settings."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if settings.log_format == "json":
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )


class Registry:
    """
    Maps namespaced identifiers to attribute kinds.

    Built once by ``initialize`` and passed to the host integration.
    """

    def __init__(self, catalog: AttributeCatalog) -> None:
        self.catalog = catalog
        self._entries: dict[str, AttributeKind] = {kind.registry_id: kind for kind in catalog}

    def get(self, registry_id: str) -> AttributeKind:
        """
        Get a kind by its namespaced id.

        Raises:
            UnknownAttributeError: If nothing is registered under the id
        """
        kind = self._entries.get(registry_id)
        if kind is None:
            raise UnknownAttributeError(f"Nothing registered under '{registry_id}'")
        return kind

    def __contains__(self, registry_id: object) -> bool:
        return registry_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def ids(self) -> list[str]:
        return list(self._entries)


def initialize(settings: Settings | None = None) -> Registry:
    """
    Build the attribute catalog and register every kind.

    Loads the default kinds plus any extra definitions from ``catalog_path``.
    Any failure here is fatal and propagates to the caller.

    Args:
        settings: Settings to use; defaults to the cached environment settings

    Returns:
        Registry of all defined attribute kinds
    """
    if settings is None:
        settings = get_settings()

    logger.info("attributes_initializing", namespace=settings.namespace)

    catalog = build_default_catalog(settings.namespace)

    if settings.catalog_path is not None:
        try:
            definitions = load_attribute_definitions(settings.catalog_path)
            define_all(catalog, definitions)
        except Exception as e:
            logger.error(
                "attribute_definitions_failed",
                path=str(settings.catalog_path),
                error=str(e),
                exc_info=True,
            )
            raise

    registry = Registry(catalog)

    logger.info(
        "attributes_registered",
        namespace=settings.namespace,
        attribute_count=len(registry),
    )

    return registry


def run() -> None:
    """
    Command-line entry point: initialize and list registered attributes.

    Exits with status 1 if initialization fails.
    """
    settings = get_settings()
    configure_logging(settings)

    try:
        registry = initialize(settings)
    except Exception as e:
        logger.error(
            "initialization_fatal_error",
            error=str(e),
            exc_info=True,
        )
        sys.exit(1)

    for kind in registry.catalog:
        logger.info(
            "attribute_available",
            attribute=kind.registry_id,
            base=kind.base,
            min=kind.min,
            max=kind.max,
        )


if __name__ == "__main__":
    run()
