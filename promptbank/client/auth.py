"""Sign-in, sign-up and sign-out flows for the client core."""

import logging

from .gateway import ActionResult
from .notifications import Notifier
from .state import AppState

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthForms:
    def __init__(self, state: AppState, notifier: Notifier):
        self.state = state
        self.notifier = notifier

    def sign_up(self, email: str, password: str, confirm_password: str) -> ActionResult:
        if password != confirm_password:
            return self._invalid("Passwords do not match", "confirm_password")
        if len(password) < MIN_PASSWORD_LENGTH:
            return self._invalid(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters", "password"
            )
        result = self.state.gateway.sign_up(email, password)
        if not result.ok:
            self.notifier.error(result.error.message)
            return result
        self.notifier.success("Account created")
        return result

    def sign_in(self, email: str, password: str) -> ActionResult:
        result = self.state.gateway.sign_in(email, password)
        if not result.ok:
            self.notifier.error(result.error.message)
            return result
        self.notifier.success("Welcome back!")
        self.state.refresh()
        return result

    def sign_out(self) -> ActionResult:
        result = self.state.gateway.sign_out()
        if not result.ok:
            logger.warning("Sign out failed on the server: %s", result.error.message)
        self.state.signed_out()
        return result

    def _invalid(self, message: str, field: str) -> ActionResult:
        self.notifier.error(message)
        return ActionResult.invalid(message, field=field)
