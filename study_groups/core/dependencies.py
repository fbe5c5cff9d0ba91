"""
FastAPI dependency injection functions.

This module provides dependency functions that can be injected into
FastAPI route handlers for the group services and the caller identity.
The services themselves are created once per application in
`study_groups.main.create_app` and kept on `app.state`.
"""

from fastapi import Request

from study_groups.config.settings import Settings
from study_groups.models.groups import Principal
from study_groups.services.domain.group_store import GroupStore
from study_groups.services.domain.message_view import MessageView


def get_settings(request: Request) -> Settings:
    """
    FastAPI dependency for the application settings.

    Returns:
        Settings: settings the application was created with
    """
    return request.app.state.settings


def get_group_store(request: Request) -> GroupStore:
    """
    FastAPI dependency for the group store.

    Returns:
        GroupStore: the single store owned by the application
    """
    return request.app.state.group_store


def get_message_view(request: Request) -> MessageView:
    """
    FastAPI dependency for the message view.

    Returns:
        MessageView: pagination service bound to the application's store
    """
    return request.app.state.message_view


def get_caller(request: Request) -> Principal:
    """
    Resolve the caller identity for the current request.

    The identity is read from the configured principal header. Requests
    without one act as the anonymous principal.
    """
    settings = get_settings(request)
    principal = request.headers.get(settings.principal_header, "").strip()
    return principal or settings.anonymous_principal
