"""Screen controllers: presentation state for each app screen."""

from .application import ApplicationController
from .auth import AuthController
from .base import ScreenController
from .feedback import FeedbackController
from .home import HomeController
from .job_board import JobBoardController
from .profile import ProfileController
from .saved_jobs import SavedJobsController
from .screen_config import DARK_THEME, LIGHT_THEME, ScreenConfig
from .settings import SettingsController

__all__ = [
    "ScreenConfig",
    "ScreenController",
    "JobBoardController",
    "HomeController",
    "SavedJobsController",
    "ProfileController",
    "ApplicationController",
    "FeedbackController",
    "AuthController",
    "SettingsController",
    "LIGHT_THEME",
    "DARK_THEME",
]
