"""Public artist use cases."""

from folio.application.usecase.artist.get_artist import (
    GetArtistResponse,
    GetArtistUseCase,
)

__all__ = ["GetArtistResponse", "GetArtistUseCase"]
