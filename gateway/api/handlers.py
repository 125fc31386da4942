"""
Request handlers.

Each handler maps a request to a response given the current provider
handles. Chat failures are raised as GatewayError subclasses and become
HTTP 400/500; upload failures are reported in-band with HTTP 200 and
``success=False``.
"""
import logging

from openai import OpenAIError

from gateway.config import Settings
from gateway.errors import ClientUnavailable, UpstreamError
from gateway.models.schemas import (
    ChatRequest,
    ChatResponse,
    EffectiveConfig,
    HealthStatus,
    ServiceFlags,
    UploadRequest,
    UploadResponse,
)
from gateway.services.clients import Clients

logger = logging.getLogger(__name__)


async def handle_chat(clients: Clients, request: ChatRequest) -> ChatResponse:
    if clients.completion is None:
        raise ClientUnavailable("completion client not configured")

    try:
        reply = await clients.completion.complete(request.message)
    except OpenAIError as e:
        raise UpstreamError(f"failed to get completion response: {e}") from e

    return ChatResponse(reply=reply)


def handle_upload(clients: Clients, request: UploadRequest) -> UploadResponse:
    storage = clients.storage
    if storage is None:
        return UploadResponse(success=False, message="storage client not configured")

    bucket, name = request.bucket_name, request.file_name

    try:
        exists = storage.bucket_exists(bucket)
    except Exception as e:
        logger.warning(f"Bucket existence check failed for '{bucket}': {e}")
        return UploadResponse(success=False, message=f"failed to check bucket existence: {e}")

    if not exists:
        try:
            storage.make_bucket(bucket)
        except Exception as e:
            logger.warning(f"Bucket creation failed for '{bucket}': {e}")
            return UploadResponse(success=False, message=f"failed to create bucket: {e}")

    # A bucket created above is left in place if the write fails.
    try:
        storage.put_text(bucket, name, request.content)
    except Exception as e:
        logger.warning(f"Upload of '{name}' to '{bucket}' failed: {e}")
        return UploadResponse(success=False, message=f"failed to upload file: {e}")

    return UploadResponse(
        success=True,
        message=f"File {name} uploaded successfully to bucket {bucket}",
    )


def handle_health(clients: Clients, settings: Settings) -> HealthStatus:
    """Reports configuration presence only; providers are not probed."""
    return HealthStatus(
        status="healthy",
        services=ServiceFlags(
            completion=clients.completion is not None,
            storage=clients.storage is not None,
        ),
        config=EffectiveConfig(
            port=settings.port,
            storage_endpoint=settings.storage_endpoint,
        ),
    )
