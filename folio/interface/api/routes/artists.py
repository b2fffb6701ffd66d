"""Public artist routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from folio.application.usecase.artist import GetArtistResponse, GetArtistUseCase

router = APIRouter(prefix="/artists", tags=["artists"], route_class=DishkaRoute)


@router.get("/{slug}", response_model=GetArtistResponse)
async def get_artist(
    slug: str, get_artist_use_case: FromDishka[GetArtistUseCase]
) -> GetArtistResponse:
    """Public portfolio page data: portfolio, public links and active prices."""
    return await get_artist_use_case.execute(slug)
