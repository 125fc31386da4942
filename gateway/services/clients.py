"""Process-wide provider handles, built once at startup."""

import logging
from dataclasses import dataclass
from typing import Optional

from gateway.config import Settings
from gateway.services.completion_service import CompletionService
from gateway.services.storage_service import ObjectStorage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Clients:
    completion: Optional[CompletionService] = None
    storage: Optional[ObjectStorage] = None


def build_clients(settings: Settings) -> Clients:
    completion = None
    if settings.completion_enabled:
        completion = CompletionService.from_settings(settings)
        logger.info(f"Completion client initialized (model={settings.completion_model})")
    else:
        logger.info("Completion API key not provided, chat functionality will be disabled")

    storage = None
    if settings.storage_enabled:
        try:
            storage = ObjectStorage.from_settings(settings)
            logger.info(f"Storage client initialized ({storage.endpoint_url})")
        except Exception as e:
            logger.error(f"Failed to initialize storage client: {e}")
    else:
        logger.info("Storage credentials not provided, file upload functionality will be disabled")

    return Clients(completion=completion, storage=storage)
