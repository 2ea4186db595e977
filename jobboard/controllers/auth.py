"""
Onboarding, login, signup and password reset.

Without an account client, login and signup are local: the profile is
created from the email and stored. With one, credentials are checked by
the jobs backend first.
"""

import asyncio
from typing import Any, Dict, Optional

from jobboard.common.error_handling import AuthError, StoreError, ValidationError
from jobboard.common.types import UserProfile
from jobboard.services.account_client import AccountClient
from jobboard.services.auth_service import ForgotPassword
from jobboard.services.preferences_service import PreferencesService
from jobboard.services.profile_service import ProfileService

from .base import ScreenController
from .screen_config import ScreenConfig

ROUTE_ONBOARDING = "Onboarding"
ROUTE_LOGIN = "Login"
ROUTE_MAIN = "Main"

NOTICE_LOGIN = "Login Successful"
NOTICE_SIGNUP = "Signup Successful"


class AuthController(ScreenController):

    screen_name = "auth"

    def __init__(
        self,
        profiles: ProfileService,
        preferences: PreferencesService,
        account_client: Optional[AccountClient] = None,
        forgot_password: Optional[ForgotPassword] = None,
        config: Optional[ScreenConfig] = None,
    ):
        super().__init__(config)
        self.profiles = profiles
        self.preferences = preferences
        self.account_client = account_client
        self.forgot_password = forgot_password or ForgotPassword()
        self.route: Optional[str] = None
        self.profile: Optional[UserProfile] = None
        self.account: Optional[Dict[str, Any]] = None

    async def on_mount(self) -> None:
        route = await self.initial_route()
        self._apply_if_mounted(lambda: setattr(self, "route", route))

    async def initial_route(self) -> str:
        if await self.preferences.is_onboarding_completed():
            return ROUTE_LOGIN
        return ROUTE_ONBOARDING

    async def complete_onboarding(self) -> None:
        await self.preferences.complete_onboarding()
        self._apply_if_mounted(lambda: setattr(self, "route", ROUTE_LOGIN))

    def enter_as_guest(self) -> None:
        self.route = ROUTE_MAIN

    async def login(self, email: str, password: str) -> None:
        await self._authenticate(email, password, signup=False)

    async def signup(self, email: str, password: str) -> None:
        await self._authenticate(email, password, signup=True)

    async def _authenticate(self, email: str, password: str, signup: bool) -> None:
        account = None
        try:
            if self.account_client is not None:
                call = self.account_client.signup if signup else self.account_client.login
                account = await asyncio.to_thread(call, email, password)
            profile = await self.profiles.create_from_credentials(email, password)
        except ValidationError as e:
            self.show_alert(str(e))
            return
        except AuthError as e:
            self.show_alert(str(e))
            return
        except StoreError as e:
            self.log.error(f"Error storing profile: {e}")
            self._apply_if_mounted(lambda: setattr(self, "error_message", str(e)))
            return

        def apply():
            self.account = account
            self.profile = profile
            self.route = ROUTE_MAIN
            self.show_notice(NOTICE_SIGNUP if signup else NOTICE_LOGIN)

        self._apply_if_mounted(apply)

    def request_password_reset(self, email: str) -> None:
        try:
            self.show_notice(self.forgot_password.request_reset(email))
        except ValidationError as e:
            self.show_alert(str(e))
