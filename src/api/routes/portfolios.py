"""Public profile page routes."""

from fastapi import APIRouter, Response, status

from src.api.deps import PortfolioServiceDep
from src.schemas.portfolio import PageState, ProfilePage

router = APIRouter(prefix="/portfolios", tags=["portfolios"])

_STATUS_CODES = {
    PageState.READY: status.HTTP_200_OK,
    PageState.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    PageState.ERROR: status.HTTP_502_BAD_GATEWAY,
}


@router.get(
    "/{identifier}",
    response_model=ProfilePage,
    responses={
        200: {"description": "Profile loaded"},
        404: {"description": "No user matches the identifier"},
        502: {"description": "The profile could not be loaded"},
    },
    summary="Get a public profile page",
    description=(
        "Resolves the identifier with the configured strategy and returns the user "
        "with their published projects and approved recommendations."
    ),
)
async def get_profile_page(identifier: str, response: Response, service: PortfolioServiceDep) -> ProfilePage:
    """Assemble a public profile page.

    The body is always a ProfilePage; its ``state`` tells the frontend which
    view to render and the status code mirrors it.

    Args:
        identifier: Route parameter naming the profile.
        response: FastAPI response object for setting status code.
        service: Profile page assembler.

    Returns:
        ProfilePage: The assembled page.
    """
    page = await service.load_profile(identifier)
    response.status_code = _STATUS_CODES.get(page.state, status.HTTP_200_OK)
    return page
