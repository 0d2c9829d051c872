"""
Accounts module interface.

Other modules should depend on IAccountService, not the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from .models import AccountInfo, LauncherUserProfile, PlayerProfile, UserAccount


@runtime_checkable
class IAccountService(Protocol):
    """
    Interface for account operations.

    Registration, account lookup for the signed-in user, the public
    launcher profile and password changes.
    """

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        profile_name: str,
    ) -> tuple[UserAccount, PlayerProfile]:
        """
        Create an account together with its default profile.

        Raises:
            MissingFieldsError: If any field is empty
            DuplicateIdentifierError: If username or email is taken
        """
        ...

    async def get_account_info(self, user_id: str) -> AccountInfo:
        """
        Raises:
            AccountNotFoundError: If the account does not exist
        """
        ...

    async def get_launcher_profile(self, identifier: str) -> LauncherUserProfile:
        """
        Look up a player by username or email for the launcher.

        Raises:
            UnknownPlayerError: If no account matches
        """
        ...

    async def change_password(
        self,
        user_id: str,
        current_password: str,
        new_password: str,
    ) -> None:
        """
        Replace the account password and revoke the user's sessions.

        Raises:
            MissingFieldsError: If either password is empty
            WeakPasswordError: If the new password is too short
            IncorrectPasswordError: If current_password is wrong
            AccountNotFoundError: If the account does not exist
        """
        ...
