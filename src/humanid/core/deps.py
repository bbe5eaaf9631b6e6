"""Factory functions for the application-wide ID registry."""

import logging
from typing import Optional

from humanid.configs.config import AppConfig, get_app_config
from humanid.infra.singleton import singleton

from .models import IdConfig
from .registry import IdRegistry, build

logger = logging.getLogger(__name__)


def build_registry(config: AppConfig) -> IdRegistry[str]:
    """Build a registry from the ``ids`` settings with the default generator.

    Raises:
        EmptyDefinitions: no types are configured.
    """
    registry = build(
        config.ids.types,
        IdConfig(default_length=config.ids.default_length),
    )
    logger.info(
        "ID registry ready: %s",
        ", ".join(f"{t}={registry.get_prefix(t)}" for t in registry.entity_types),
    )
    return registry


@singleton
def get_registry(config: Optional[AppConfig] = None) -> IdRegistry[str]:
    """Get the process-wide registry, built on first call."""
    return build_registry(config if config is not None else get_app_config())
