"""
adfs
^^^^

Handles the forms based ADFS authentication - throws appropriate errors in
the events of blank input or an identity provider that refuses to hand back
a login page.
"""

import logging

import requests

from adfs_auth import base_client

log = logging.getLogger(__name__)


class EmptyInput(base_client.BaseException):
    """Invalid Input - Empty String Detected"""


class LoginError(base_client.BaseException):
    """ADFS login failed after retrying"""


class Adfs(base_client.BaseAdfsClient):
    """ADFS Login Object.

    Submits the user's directory credentials to the IdP initiated sign on
    page and hands back the raw response body, which carries the
    SAMLResponse form when the login succeeded. Each Adfs object owns its
    own requests.Session(), so cookies never leak between runs.
    """

    def __init__(
        self, host, username, password, timeout=base_client.DEFAULT_TIMEOUT
    ):
        base_client.BaseAdfsClient.__init__(self, host, timeout)
        log.debug("Sign on URL Set to: {url}".format(url=self.sign_on_url))

        # Validate the inputs are reasonably sane
        for input in (host, username, password):
            if input == "" or input is None:
                raise EmptyInput()

        self.username = username
        self.password = password

    def login(self):
        """Performs the forms authentication against ADFS.

        ADFS occasionally rejects the first POST of a fresh session (the
        sign on flow wants its own cookies set first), so a failed first
        attempt is retried exactly once, straight away. Whatever the second
        attempt returns is what the caller gets.

        Returns:
            The login response body.
        """
        data = {
            "UserName": self.username,
            "Password": self.password,
            "AuthMethod": "FormsAuthentication",
        }

        try:
            return self._request(data)
        except requests.exceptions.RequestException as e:
            log.warning("ADFS login failed ({err}), retrying once".format(err=e))

        try:
            return self._request(data)
        except requests.exceptions.RequestException as e:
            raise LoginError(
                "Failed to login to ADFS as {user}: {err}".format(
                    user=self.username, err=e
                )
            ) from e
