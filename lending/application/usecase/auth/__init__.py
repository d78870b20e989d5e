"""Authentication use cases."""

from .get_current_user import GetCurrentUserUseCase
from .sign_in import SignInUseCase

__all__ = ["SignInUseCase", "GetCurrentUserUseCase"]
