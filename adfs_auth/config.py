from adfs_auth import base_client

DEFAULT_CREDS_FILE = "/tmp/adfs-auth-creds"
DEFAULT_REGION = "eu-west-1"


class Config(object):
    """Settings shared by every stage of a single login run."""

    def __init__(
        self,
        host,
        creds_file=DEFAULT_CREDS_FILE,
        region=DEFAULT_REGION,
        timeout=base_client.DEFAULT_TIMEOUT,
    ):
        self.host = host
        self.creds_file = creds_file
        self.region = region
        self.timeout = timeout
