"""Admin user management use cases."""

from folio.application.usecase.admin.delete_user import DeleteUserUseCase
from folio.application.usecase.admin.ensure_superadmin import (
    EnsureSuperadminResponse,
    EnsureSuperadminUseCase,
)
from folio.application.usecase.admin.list_users import (
    ListUsersResponse,
    ListUsersUseCase,
    UserItem,
)
from folio.application.usecase.admin.update_user import (
    UpdateUserRequest,
    UpdateUserResponse,
    UpdateUserUseCase,
    UserAction,
)

__all__ = [
    "DeleteUserUseCase",
    "EnsureSuperadminResponse",
    "EnsureSuperadminUseCase",
    "ListUsersResponse",
    "ListUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserResponse",
    "UpdateUserUseCase",
    "UserAction",
    "UserItem",
]
