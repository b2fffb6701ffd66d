"""Studio (artist self-service) use cases."""

from folio.application.usecase.studio.common import LinkView, PortfolioView, PriceView
from folio.application.usecase.studio.get_portfolio import (
    GetStudioPortfolioResponse,
    GetStudioPortfolioUseCase,
)
from folio.application.usecase.studio.links import (
    CreateLinkRequest,
    CreateLinkUseCase,
    DeleteLinkUseCase,
    LinkListResponse,
    ListLinksUseCase,
    UpdateLinkRequest,
    UpdateLinkUseCase,
)
from folio.application.usecase.studio.prices import (
    CreatePriceRequest,
    CreatePriceUseCase,
    DeletePriceUseCase,
    ListPricesUseCase,
    PriceListResponse,
    UpdatePriceRequest,
    UpdatePriceUseCase,
)
from folio.application.usecase.studio.update_portfolio import (
    UpdatePortfolioRequest,
    UpdatePortfolioResponse,
    UpdatePortfolioUseCase,
)

__all__ = [
    "CreateLinkRequest",
    "CreateLinkUseCase",
    "CreatePriceRequest",
    "CreatePriceUseCase",
    "DeleteLinkUseCase",
    "DeletePriceUseCase",
    "GetStudioPortfolioResponse",
    "GetStudioPortfolioUseCase",
    "LinkListResponse",
    "LinkView",
    "ListLinksUseCase",
    "ListPricesUseCase",
    "PortfolioView",
    "PriceListResponse",
    "PriceView",
    "UpdateLinkRequest",
    "UpdateLinkUseCase",
    "UpdatePortfolioRequest",
    "UpdatePortfolioResponse",
    "UpdatePortfolioUseCase",
    "UpdatePriceRequest",
    "UpdatePriceUseCase",
]
