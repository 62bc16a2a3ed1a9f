"""
aws
^^^

Trades a SAML assertion for STS credentials, uses those to assume the
target role and writes the result out as shell exports.
"""

import collections
import logging
import os
import tempfile

import boto3
import botocore.config
import botocore.exceptions

from adfs_auth import base_client

log = logging.getLogger(__name__)

CREDENTIALS_TEMPLATE = (
    "export AWS_ACCESS_KEY_ID={access_key_id}\n"
    "export AWS_SECRET_ACCESS_KEY={secret_access_key}\n"
    "export AWS_SESSION_TOKEN={session_token}\n"
    "{account_id_export}"
)

BOTO_ERRORS = (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError)


class AwsError(base_client.BaseException):
    """Base error for STS calls"""


class FederationError(AwsError):
    """AssumeRoleWithSAML was rejected"""


class AssumeRoleError(AwsError):
    """AssumeRole or GetCallerIdentity with the federated session failed"""


class PersistenceError(base_client.BaseException):
    """Could not write the credentials file"""


class Credentials(
    collections.namedtuple(
        "Credentials",
        ["access_key_id", "secret_access_key", "session_token", "expiration"],
    )
):
    __slots__ = ()

    def __new__(cls, access_key_id, secret_access_key, session_token, expiration=None):
        return super(Credentials, cls).__new__(
            cls, access_key_id, secret_access_key, session_token, expiration
        )

    @classmethod
    def from_sts(cls, creds):
        """Builds Credentials from the Credentials dict of an STS response"""
        return cls(
            access_key_id=creds["AccessKeyId"],
            secret_access_key=creds["SecretAccessKey"],
            session_token=creds["SessionToken"],
            expiration=creds.get("Expiration"),
        )


IdentityMetadata = collections.namedtuple("IdentityMetadata", ["account_id"])


def sts_client(region, credentials=None, timeout=base_client.DEFAULT_TIMEOUT):
    """Returns a brand new STS client.

    With credentials, the client signs every call with exactly those static
    keys and never looks for others. A client is never re-pointed at new
    credentials; build another one instead.
    """
    boto_config = botocore.config.Config(connect_timeout=timeout, read_timeout=timeout)

    if credentials is None:
        return boto3.client("sts", region_name=region, config=boto_config)

    return boto3.client(
        "sts",
        region_name=region,
        aws_access_key_id=credentials.access_key_id,
        aws_secret_access_key=credentials.secret_access_key,
        aws_session_token=credentials.session_token,
        config=boto_config,
    )


def exchange_saml_for_credentials(
    principal_arn, role_arn, assertion, region, timeout=base_client.DEFAULT_TIMEOUT
):
    """Calls AssumeRoleWithSAML with the still base64 encoded assertion."""
    log.debug("AssumeRoleWithSAML for {role}".format(role=role_arn))
    try:
        resp = sts_client(region, timeout=timeout).assume_role_with_saml(
            RoleArn=role_arn, PrincipalArn=principal_arn, SAMLAssertion=assertion
        )
    except BOTO_ERRORS as e:
        raise FederationError(
            "Could not exchange SAML assertion for {role}: {err}".format(
                role=role_arn, err=e
            )
        ) from e

    creds = Credentials.from_sts(resp["Credentials"])
    log.debug("Federated session expires {exp}".format(exp=creds.expiration))
    return creds


def assume_target_role(
    session_credentials,
    target_role_arn,
    session_name,
    region,
    timeout=base_client.DEFAULT_TIMEOUT,
):
    """Assumes target_role_arn as the federated session.

    Returns:
        A (Credentials, IdentityMetadata) tuple for the target role.
    """
    client = sts_client(region, session_credentials, timeout)

    try:
        resp = client.assume_role(
            RoleArn=target_role_arn, RoleSessionName=session_name
        )
        identity = client.get_caller_identity()
    except BOTO_ERRORS as e:
        raise AssumeRoleError(
            "Could not assume {role}: {err}".format(role=target_role_arn, err=e)
        ) from e

    creds = Credentials.from_sts(resp["Credentials"])
    log.debug("Target role session expires {exp}".format(exp=creds.expiration))
    return creds, IdentityMetadata(account_id=identity.get("Account"))


def format_credentials(credentials, identity):
    """Renders the shell export file.

    The fourth line is the account id export, or empty when STS did not
    tell us the account.
    """
    account_id_export = ""
    if identity is not None and identity.account_id:
        account_id_export = "export AWS_ACCOUNT_ID={account_id}".format(
            account_id=identity.account_id
        )

    return CREDENTIALS_TEMPLATE.format(
        access_key_id=credentials.access_key_id,
        secret_access_key=credentials.secret_access_key,
        session_token=credentials.session_token,
        account_id_export=account_id_export,
    )


def write_credentials(path, credentials, identity):
    """Atomically writes the shell export file to path.

    The file is written next to path and renamed over it only once fully
    written, so a failed run never leaves a truncated file behind.
    """
    directory = os.path.dirname(os.path.abspath(path))
    content = format_credentials(credentials, identity)

    tmp_path = None
    try:
        # mkstemp creates the file readable by its owner only
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".adfs-auth-")
        with os.fdopen(fd, "w") as tmp:
            tmp.write(content)
        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise PersistenceError(
            "Could not write credentials to {path}: {err}".format(path=path, err=e)
        ) from e

    log.info("Wrote credentials to {path}".format(path=path))
