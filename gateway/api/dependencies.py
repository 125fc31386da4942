"""
API Dependencies (provider handles and settings from app state)
"""
from fastapi import Request

from gateway.config import Settings
from gateway.services.clients import Clients


def get_clients(request: Request) -> Clients:
    # Unset until the lifespan runs; serve in degraded mode meanwhile.
    return getattr(request.app.state, "clients", None) or Clients()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
