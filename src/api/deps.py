"""FastAPI dependency injection functions."""

from typing import Annotated

from fastapi import Depends
from supabase import Client

from src.core.config import Settings, get_settings
from src.core.supabase import get_supabase_client
from src.services.identity_resolver import IdentityResolver, create_identity_resolver
from src.services.portfolio_service import PortfolioService
from src.services.project_service import ProjectService
from src.services.recommendation_service import RecommendationService
from src.services.user_service import UserService


def get_db_client() -> Client:
    """Get the Supabase client handed to every service.

    Override this dependency to run the API against another store.
    """
    return get_supabase_client()


AppSettings = Annotated[Settings, Depends(get_settings)]
DbClient = Annotated[Client, Depends(get_db_client)]


def get_user_service(client: DbClient, settings: AppSettings) -> UserService:
    """Get user service bound to the request's client."""
    return UserService(client, username_email_domain=settings.username_email_domain)


def get_project_service(client: DbClient) -> ProjectService:
    """Get project service bound to the request's client."""
    return ProjectService(client)


def get_recommendation_service(client: DbClient) -> RecommendationService:
    """Get recommendation service bound to the request's client."""
    return RecommendationService(client)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
RecommendationServiceDep = Annotated[RecommendationService, Depends(get_recommendation_service)]


def get_identity_resolver(user_service: UserServiceDep, settings: AppSettings) -> IdentityResolver:
    """Get the resolver for the configured identity strategy."""
    return create_identity_resolver(settings.identity_strategy, user_service)


IdentityResolverDep = Annotated[IdentityResolver, Depends(get_identity_resolver)]


def get_portfolio_service(
    resolver: IdentityResolverDep,
    project_service: ProjectServiceDep,
    recommendation_service: RecommendationServiceDep,
    settings: AppSettings,
) -> PortfolioService:
    """Get the profile page assembler."""
    return PortfolioService(
        resolver=resolver,
        project_service=project_service,
        recommendation_service=recommendation_service,
        timeout_seconds=settings.profile_load_timeout_seconds,
        include_linked_projects=settings.include_linked_projects,
    )


PortfolioServiceDep = Annotated[PortfolioService, Depends(get_portfolio_service)]
