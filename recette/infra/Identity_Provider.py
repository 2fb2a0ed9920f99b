"""Identity providers (email/password, Apple/Google stand-ins) and the auth session state."""
from __future__ import annotations

import base64
import hashlib
import hmac
import logging
import os
from threading import Lock
from typing import Dict, Optional

from recette.events.event_helpers import publish_signed_in, publish_signed_out
from recette.utilities.constants import MIN_PASSWORD_LENGTH

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "メールアドレスとパスワードを入力してください"
PASSWORD_TOO_SHORT = f"パスワードは{MIN_PASSWORD_LENGTH}文字以上で入力してください"
INVALID_CREDENTIALS = "メールアドレスまたはパスワードが正しくありません"
ALREADY_REGISTERED = "このメールアドレスは既に登録されています"

# Password hashing (stdlib pbkdf2_hmac).
_PBKDF2_ALG = "sha256"
_PBKDF2_ITERATIONS = 200_000


class AuthError(ValueError):
    """Sign-up / sign-in rejected; the message is shown to the user."""


class SignInCancelled(Exception):
    """The user dismissed the provider's sign-in sheet."""


def hash_password(password: str) -> str:
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac(_PBKDF2_ALG, password.encode("utf-8"), salt, _PBKDF2_ITERATIONS)
    salt_b64 = base64.urlsafe_b64encode(salt).decode("ascii")
    dk_b64 = base64.urlsafe_b64encode(dk).decode("ascii")
    return f"pbkdf2_{_PBKDF2_ALG}${_PBKDF2_ITERATIONS}${salt_b64}${dk_b64}"


def verify_password(password: str, password_hash: str) -> bool:
    try:
        scheme, iter_s, salt_b64, dk_b64 = password_hash.split("$", 3)
        alg = scheme.split("_", 1)[1]
        salt = base64.urlsafe_b64decode(salt_b64)
        expected = base64.urlsafe_b64decode(dk_b64)
        dk = hashlib.pbkdf2_hmac(alg, password.encode("utf-8"), salt, int(iter_s))
    except (ValueError, IndexError):
        return False
    return hmac.compare_digest(dk, expected)


class IdentityProvider:
    """Collaborator interface: sign in yielding a user identifier, sign out."""

    name = "base"

    def sign_in(self, **credentials) -> str:
        raise NotImplementedError

    def sign_out(self) -> None:
        pass


class EmailIdentityProvider(IdentityProvider):
    name = "email"

    def __init__(self):
        self._lock = Lock()
        self._users: Dict[str, str] = {}  # email -> password hash

    @staticmethod
    def _check_present(email: str, password: str):
        if not email or not password:
            raise AuthError(MISSING_CREDENTIALS)

    def sign_up(self, email: str, password: str) -> str:
        self._check_present(email, password)
        if len(password) < MIN_PASSWORD_LENGTH:
            raise AuthError(PASSWORD_TOO_SHORT)
        with self._lock:
            if email in self._users:
                raise AuthError(ALREADY_REGISTERED)
            self._users[email] = hash_password(password)
        logger.info("Registered user %s", email)
        return email

    def sign_in(self, email: str = "", password: str = "", **_) -> str:
        self._check_present(email, password)
        with self._lock:
            stored = self._users.get(email)
        if stored is None or not verify_password(password, stored):
            raise AuthError(INVALID_CREDENTIALS)
        return email


class StubIdentityProvider(IdentityProvider):
    """Stand-in for a platform provider (Apple / Google).

    Returns the configured email, or ``fallback_user`` when the provider shares none.
    ``cancel`` simulates the user closing the sheet; ``error`` a provider failure.
    """

    def __init__(self, name: str, fallback_user: str, email: Optional[str] = None,
                 cancel: bool = False, error: Optional[str] = None):
        self.name = name
        self.fallback_user = fallback_user
        self.email = email
        self.cancel = cancel
        self.error = error

    def sign_in(self, **_) -> str:
        if self.cancel:
            raise SignInCancelled(self.name)
        if self.error:
            raise AuthError(self.error)
        return self.email or self.fallback_user


class AuthSession:
    """Signed-in state shared by the API: is_authenticated, current_user, error_message."""

    def __init__(self, email_provider: Optional[EmailIdentityProvider] = None,
                 providers: Optional[Dict[str, IdentityProvider]] = None, event_bus=None):
        self.email_provider = email_provider or EmailIdentityProvider()
        self.providers: Dict[str, IdentityProvider] = providers if providers is not None else {
            "apple": StubIdentityProvider("apple", "Apple User"),
            "google": StubIdentityProvider("google", "Google User"),
        }
        self.is_authenticated = False
        self.current_user = ""
        self.provider_name = ""
        self.error_message = ""
        self._event_bus = event_bus

    def _complete(self, user: str, provider: str) -> str:
        self.is_authenticated = True
        self.current_user = user
        self.provider_name = provider
        self.error_message = ""
        publish_signed_in(user, provider, bus=self._event_bus)
        return user

    def _record_failure(self, exc: AuthError):
        self.error_message = str(exc)
        logger.info("Authentication failed: %s", exc)

    def sign_up_with_email(self, email: str, password: str) -> str:
        self.error_message = ""
        try:
            user = self.email_provider.sign_up(email, password)
        except AuthError as e:
            self._record_failure(e)
            raise
        return self._complete(user, self.email_provider.name)

    def sign_in_with_email(self, email: str, password: str) -> str:
        self.error_message = ""
        try:
            user = self.email_provider.sign_in(email=email, password=password)
        except AuthError as e:
            self._record_failure(e)
            raise
        return self._complete(user, self.email_provider.name)

    def sign_in_with(self, provider_name: str) -> Optional[str]:
        '''Signs in through a named provider. Returns None when the user cancelled.'''
        self.error_message = ""
        provider = self.providers.get(provider_name)
        if provider is None:
            raise ValueError(f"Unknown identity provider '{provider_name}'.")
        try:
            user = provider.sign_in()
        except SignInCancelled:
            # cancelling is not an error
            return None
        except AuthError as e:
            self._record_failure(e)
            raise
        return self._complete(user, provider.name)

    def sign_out(self):
        user = self.current_user
        provider = self.providers.get(self.provider_name) or (
            self.email_provider if self.provider_name == self.email_provider.name else None)
        if provider is not None:
            provider.sign_out()
        self.is_authenticated = False
        self.current_user = ""
        self.provider_name = ""
        self.error_message = ""
        if user:
            publish_signed_out(user, bus=self._event_bus)

    def to_dict(self):
        return {
            "is_authenticated": self.is_authenticated,
            "current_user": self.current_user,
            "provider": self.provider_name,
            "error_message": self.error_message,
        }
