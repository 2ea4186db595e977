"""
Unit tests for the profile, application, feedback, auth and settings controllers.
"""

from unittest.mock import MagicMock

import pytest

from jobboard.common.error_handling import AuthError
from jobboard.common.repositories import USER_KEY
from jobboard.controllers import (
    DARK_THEME,
    LIGHT_THEME,
    ApplicationController,
    AuthController,
    FeedbackController,
    ProfileController,
    ScreenConfig,
    SettingsController,
)
from jobboard.controllers.auth import ROUTE_LOGIN, ROUTE_MAIN, ROUTE_ONBOARDING
from jobboard.controllers.profile import PROFILE_NOT_LOADED
from jobboard.services.application_service import APPLICATION_REQUIRED, ApplicationService
from jobboard.services.feedback_service import FEEDBACK_REQUIRED, FeedbackService
from jobboard.services.preferences_service import PreferencesService
from jobboard.services.profile_service import NOTHING_TO_SAVE, ProfileService


class TestAuthController:

    @pytest.fixture
    def auth(self, store):
        return AuthController(ProfileService(store), PreferencesService(store))

    @pytest.mark.asyncio
    async def test_first_launch_routes_to_onboarding(self, auth):
        await auth.mount()
        assert auth.route == ROUTE_ONBOARDING

    @pytest.mark.asyncio
    async def test_after_onboarding_routes_to_login(self, auth, store):
        await auth.mount()
        await auth.complete_onboarding()
        assert auth.route == ROUTE_LOGIN

        again = AuthController(ProfileService(store), PreferencesService(store))
        await again.mount()
        assert again.route == ROUTE_LOGIN

    @pytest.mark.asyncio
    async def test_local_login(self, auth):
        await auth.mount()
        await auth.login("ann@example.com", "pw")

        assert auth.route == ROUTE_MAIN
        assert auth.notice == "Login Successful"
        assert auth.profile.name == "ann"

    @pytest.mark.asyncio
    async def test_login_missing_fields_alerts(self, auth):
        await auth.mount()
        await auth.login("", "")

        assert auth.alert == "Please enter email and password"
        assert auth.route == ROUTE_ONBOARDING

    @pytest.mark.asyncio
    async def test_remote_signup_rejected(self, store):
        account_client = MagicMock()
        account_client.signup.side_effect = AuthError("Username already exists", status_code=409)
        auth = AuthController(ProfileService(store), PreferencesService(store), account_client=account_client)
        await auth.mount()

        await auth.signup("ann@example.com", "pw")

        assert auth.alert == "Username already exists"
        assert auth.profile is None

    @pytest.mark.asyncio
    async def test_remote_signup(self, store):
        account_client = MagicMock()
        account_client.signup.return_value = {"id": "1", "username": "ann@example.com"}
        auth = AuthController(ProfileService(store), PreferencesService(store), account_client=account_client)
        await auth.mount()

        await auth.signup("ann@example.com", "pw")

        assert auth.notice == "Signup Successful"
        assert auth.account["id"] == "1"

    def test_password_reset(self, auth):
        auth.request_password_reset("")
        assert auth.alert == "Please enter your email"

        auth.request_password_reset("ann@example.com")
        assert auth.notice


class TestProfileController:

    @pytest.mark.asyncio
    async def test_edit_and_save(self, store):
        profiles = ProfileService(store)
        await profiles.create_from_credentials("ann@example.com", "pw")
        screen = ProfileController(profiles, PreferencesService(store))
        await screen.mount()

        screen.edit(bio="Product designer")
        screen.add_skill("figma")
        assert screen.is_editing
        await screen.save()

        assert screen.notice == "Profile Saved"
        assert screen.profile.bio == "Product designer"
        assert (await profiles.load()).skills == ["figma"]

    @pytest.mark.asyncio
    async def test_save_without_changes_alerts(self, store):
        screen = ProfileController(ProfileService(store), PreferencesService(store))
        await screen.mount()

        await screen.save()

        assert screen.alert == NOTHING_TO_SAVE

    @pytest.mark.asyncio
    async def test_save_failure_keeps_profile(self, failing_store):
        screen = ProfileController(ProfileService(failing_store), PreferencesService(failing_store))
        await screen.mount()

        screen.edit(name="Ann")
        await screen.save()

        assert screen.profile.name == ""
        assert screen.draft.name == "Ann"

    @pytest.mark.asyncio
    async def test_cover_photo(self, store):
        screen = ProfileController(ProfileService(store), PreferencesService(store))
        await screen.mount()

        await screen.set_cover_photo("file://cover.png")

        assert screen.draft.cover_photo == "file://cover.png"
        assert screen.notice == "Image Uploaded"

    @pytest.mark.asyncio
    async def test_draft_edits_before_mount_alert(self, store):
        screen = ProfileController(ProfileService(store), PreferencesService(store))

        screen.edit(name="Ann")
        screen.add_skill("figma")
        screen.remove_portfolio_item(0)
        await screen.save()
        screen.discard()

        assert screen.alert == PROFILE_NOT_LOADED
        assert screen.draft is None
        assert await store.get_item(USER_KEY) is None


class TestApplicationController:

    @pytest.mark.asyncio
    async def test_submit(self, store, engineer):
        screen = ApplicationController(engineer, ApplicationService(store))
        await screen.mount()

        screen.attach_resume("file://cv.pdf")
        screen.set_cover_letter("I build things")
        await screen.submit()

        assert screen.submitted
        assert screen.notice == "Application Submitted"

    @pytest.mark.asyncio
    async def test_submit_missing_fields(self, store, engineer):
        screen = ApplicationController(engineer, ApplicationService(store))
        await screen.mount()

        await screen.submit()

        assert screen.alert == APPLICATION_REQUIRED
        assert not screen.submitted


class TestFeedbackController:

    @pytest.mark.asyncio
    async def test_submit_and_reset_form(self):
        screen = FeedbackController(FeedbackService())
        await screen.mount()

        screen.set_text("Love it")
        screen.set_rating(5)
        await screen.submit()

        assert screen.notice == "Feedback Submitted"
        assert screen.text == ""
        assert len(screen.history) == 1

    @pytest.mark.asyncio
    async def test_missing_rating(self):
        screen = FeedbackController(FeedbackService())
        await screen.mount()

        screen.set_text("Love it")
        await screen.submit()

        assert screen.alert == FEEDBACK_REQUIRED


class TestSettingsController:

    @pytest.mark.asyncio
    async def test_toggle_dark_mode_persists(self, store):
        screen = SettingsController(PreferencesService(store))
        await screen.mount()
        assert screen.theme == LIGHT_THEME

        await screen.toggle_dark_mode()

        assert screen.dark_mode is True
        assert screen.theme == DARK_THEME
        assert await PreferencesService(store).is_dark_mode() is True

    @pytest.mark.asyncio
    async def test_logout_clears_store(self, store):
        prefs = PreferencesService(store)
        await prefs.complete_onboarding()
        screen = SettingsController(prefs, config=ScreenConfig(dark_mode=True))
        await screen.mount()

        await screen.logout()

        assert screen.logged_out
        assert await prefs.is_onboarding_completed() is False
