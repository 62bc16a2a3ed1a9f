import logging

import requests

log = logging.getLogger(__name__)

SIGN_ON_URL = (
    "https://{host}/adfs/ls/IdpInitiatedSignOn.aspx"
    "?loginToRp=urn:amazon:webservices"
)

# ADFS only serves the forms-based sign on page to browsers it recognizes.
USER_AGENT = "Mozilla/5.0 (Windows NT 6.1; WOW64; Trident/7.0; rv:11.0) like Gecko"

DEFAULT_TIMEOUT = 30


class BaseException(Exception):
    """Base Exception for ADFS Auth"""


class BaseAdfsClient(object):
    def __init__(self, host, timeout=DEFAULT_TIMEOUT):
        self.sign_on_url = SIGN_ON_URL.format(host=host)
        self.timeout = timeout
        self.session = requests.Session()

    def _request(self, data):
        """Basic form poster for the ADFS sign on page

        Any HTTPError is raised immediately, otherwise the response body is
        passed back as text. Redirects are followed so that the cookies set
        along the way land in our session's cookie jar.

        Args:
            data: Form fields to send as the POST body

        Returns:
            The response body as a string.
        """
        headers = {"User-Agent": USER_AGENT}

        resp = self.session.post(
            url=self.sign_on_url,
            headers=headers,
            data=data,
            timeout=self.timeout,
            allow_redirects=True,
        )
        log.debug(
            "POST {url} returned {code}".format(
                url=resp.url, code=resp.status_code
            )
        )

        resp.raise_for_status()
        return resp.text
