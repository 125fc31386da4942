"""
API Routes
"""
from fastapi import APIRouter, Depends

from gateway.api.dependencies import get_app_settings, get_clients
from gateway.api.handlers import handle_chat, handle_health, handle_upload
from gateway.config import Settings
from gateway.models.schemas import (
    ChatRequest,
    ChatResponse,
    HealthStatus,
    UploadRequest,
    UploadResponse,
)
from gateway.services.clients import Clients

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    operation_id="chat",
    summary="Send a message to the completion provider",
    responses={400: {"description": "Completion client not configured"},
               500: {"description": "Completion provider error"}},
)
async def chat(body: ChatRequest, clients: Clients = Depends(get_clients)):
    """Send a message and get a reply using the configured API key"""
    return await handle_chat(clients, body)


# Plain def: boto3 is blocking, so FastAPI runs this in its threadpool.
@router.post(
    "/upload",
    response_model=UploadResponse,
    operation_id="upload-file",
    summary="Upload a text file to object storage",
)
def upload_file(body: UploadRequest, clients: Clients = Depends(get_clients)):
    """Upload a text file; failures are reported in the body with success=false"""
    return handle_upload(clients, body)


@router.get(
    "/health",
    response_model=HealthStatus,
    operation_id="health",
    summary="Health check endpoint",
)
async def health(
    clients: Clients = Depends(get_clients),
    settings: Settings = Depends(get_app_settings),
):
    """Configuration presence of each provider and the effective settings"""
    return handle_health(clients, settings)
