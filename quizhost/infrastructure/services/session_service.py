import enum
import hashlib
import hmac
import logging
from typing import Optional

from jose import jwe
from jose.constants import ALGORITHMS
from jose.exceptions import JOSEError

from quizhost.app.domain.entities.group import Group
from quizhost.app.domain.errors import MalformedSession


logger = logging.getLogger('sessions')

HOST_COOKIE = 'host_authenticated'
GROUP_COOKIE = 'registered_group'
HOST_FLAG = 'true'


class HostState(enum.Enum):
    UNAUTHENTICATED = 'unauthenticated'
    AUTHENTICATED = 'authenticated'


class SessionService:
    """
    Issues and reads the sealed cookies that make up all session state.

    The host is authenticated for as long as the browser presents a valid
    host cookie; there is no server-side session record. Participants carry
    their whole Group in a cookie of their own.
    """
    def __init__(self, host_password: str, cookie_secret: str):
        self._host_password = host_password.encode()
        # dir + A256GCM needs exactly 32 bytes of key material
        self._key = hashlib.sha256(cookie_secret.encode()).digest()

    @classmethod
    def from_settings(cls, settings) -> "SessionService":
        return cls(host_password=settings.HOST_PASSWORD, cookie_secret=settings.COOKIE_SECRET)

    def seal(self, value: str) -> str:
        token = jwe.encrypt(value.encode(), self._key,
                            algorithm=ALGORITHMS.DIR, encryption=ALGORITHMS.A256GCM)
        return token.decode() if isinstance(token, bytes) else token

    def unseal(self, token: str) -> str:
        try:
            plaintext = jwe.decrypt(token, self._key)
        except (JOSEError, ValueError) as e:
            raise MalformedSession(f"Cookie could not be unsealed: {e}") from e
        if plaintext is None:
            raise MalformedSession("Cookie could not be unsealed")
        try:
            return plaintext.decode()
        except UnicodeDecodeError as e:
            raise MalformedSession("Cookie payload is not text") from e

    def authenticate(self, password: str) -> Optional[str]:
        """
        Checks a submitted password against the configured host secret.

        :param password: The value submitted by the login form.
        :return: Sealed host cookie value on an exact match, otherwise None.
        """
        if hmac.compare_digest(password.encode(), self._host_password):
            logger.debug("Authenticated! Setting cookie", extra={'user': 'host'})
            return self.seal(HOST_FLAG)
        logger.debug("Authentication failed", extra={'user': 'host'})
        return None

    def host_state(self, token: Optional[str]) -> HostState:
        if not token:
            return HostState.UNAUTHENTICATED
        try:
            value = self.unseal(token)
        except MalformedSession:
            logger.info("Rejected tampered or stale host cookie")
            return HostState.UNAUTHENTICATED
        return HostState.AUTHENTICATED if value == HOST_FLAG else HostState.UNAUTHENTICATED

    def is_host(self, token: Optional[str]) -> bool:
        return self.host_state(token) is HostState.AUTHENTICATED

    def group_cookie(self, group: Group) -> str:
        return self.seal(group.serialize())

    def registered_group(self, token: str) -> Group:
        return Group.deserialize(self.unseal(token))
