"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.otp import ConsoleOtpDispatcher, HttpOtpDispatcher
from src.adapters.repository.postgres import PostgresUserRepository
from src.config.settings import Settings, get_settings
from src.domain.ports import OtpDispatcher
from src.domain.signup import SignupService


def build_otp_dispatcher(settings: Settings) -> OtpDispatcher:
    """
    Create the OTP dispatcher selected by settings.

    The HTTP dispatcher receives BASE_URL here, once, at construction.
    """
    if settings.otp_dispatcher == "console":
        return ConsoleOtpDispatcher()
    return HttpOtpDispatcher(settings.base_url, timeout=settings.otp_timeout_seconds)


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresUserRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserRepository(pool)


def get_otp_dispatcher(request: Request) -> OtpDispatcher:
    """Get the dispatcher created during app lifespan startup."""
    return request.app.state.otp_dispatcher


def get_signup_service(request: Request) -> SignupService:
    """
    Create signup service with injected dependencies.

    Wires together the repository, OTP dispatcher and bcrypt work factor.
    """
    settings = get_settings()
    return SignupService(
        repository=get_repository(request),
        otp_dispatcher=get_otp_dispatcher(request),
        work_factor=settings.bcrypt_cost,
    )
