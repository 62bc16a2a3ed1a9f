import getpass
import logging
import sys

import rainbow_logging_handler

from adfs_auth import adfs
from adfs_auth import aws
from adfs_auth import aws_saml
from adfs_auth.metadata import __desc__, __version__


def setup_logging():
    """Returns back a pretty color-coded logger"""
    logger = logging.getLogger()
    logger.setLevel(logging.INFO)
    handler = rainbow_logging_handler.RainbowLoggingHandler(sys.stdout)
    fmt = "%(asctime)-10s (%(levelname)s) %(message)s"
    formatter = logging.Formatter(fmt)
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def login(
    config,
    username: str,
    target_role_arn: str,
    role_filter: str,
    session_name: str,
    password: str = None,
    debug: bool = False,
):
    # Generate our logger first, and write out our app name and version
    log = setup_logging()
    log.info("%s v%s" % (__desc__, __version__))

    if debug:
        log.setLevel(logging.DEBUG)

    # Ask the user for their password if it was not handed to us. It lives in
    # memory for this one run and is never written out or cached anywhere.
    if password is None:
        password = getpass.getpass()

    try:
        adfs_client = adfs.Adfs(config.host, username, password, config.timeout)
    except adfs.EmptyInput:
        log.error("Cannot enter a blank string for any input")
        raise

    log.info("Logging in to {host} as {user}".format(host=config.host, user=username))
    try:
        body = adfs_client.login()
    except adfs.LoginError as e:
        log.error(e)
        raise

    try:
        assertion = aws_saml.SamlAssertion.from_response(body)
    except aws_saml.ParseError as e:
        log.error("Unexpected ADFS login response: {err}".format(err=e))
        raise

    try:
        role = assertion.select_role(role_filter)
    except aws_saml.RoleError as e:
        log.error(e)
        raise

    log.info("Getting federated credentials for {role}".format(role=role.role_arn))
    try:
        session_creds = aws.exchange_saml_for_credentials(
            role.principal_arn,
            role.role_arn,
            assertion.encoded,
            config.region,
            config.timeout,
        )
    except aws.FederationError as e:
        log.error(e)
        raise

    log.info("Assuming {role}".format(role=target_role_arn))
    try:
        target_creds, identity = aws.assume_target_role(
            session_creds, target_role_arn, session_name, config.region, config.timeout
        )
    except aws.AssumeRoleError as e:
        log.error(e)
        raise

    try:
        aws.write_credentials(config.creds_file, target_creds, identity)
    except aws.PersistenceError as e:
        log.error(e)
        raise
