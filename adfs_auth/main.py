#!/usr/bin/env python

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import argparse
import sys

from adfs_auth import auth, base_client, config
from adfs_auth.metadata import __version__


def get_config_parser(argv):
    """Returns a configured ArgumentParser for the CLI options"""
    epilog = (
        "**Sourcing the credentials**\n"
        "The login command writes shell export statements for the target \n"
        "role's temporary credentials. Load them into your shell with: \n"
        "\n"
        "\tsource {creds_file}\n".format(creds_file=config.DEFAULT_CREDS_FILE)
    )

    arg_parser = argparse.ArgumentParser(
        prog=argv[0],
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=epilog,
        description="ADFS Auther",
    )

    arg_parser.add_argument(
        "-a",
        "--ad-url",
        type=str,
        help="ADFS host name - ie, if your sign on page is "
        "https://adfs.foobar.com/adfs/ls/, enter adfs.foobar.com here",
        required=True,
    )
    arg_parser.add_argument(
        "-t",
        "--temp-creds-file",
        type=str,
        help="Where to write the credentials export file",
        default=config.DEFAULT_CREDS_FILE,
    )
    arg_parser.add_argument(
        "--region",
        type=str,
        help="AWS region used for the STS calls",
        default=config.DEFAULT_REGION,
    )
    arg_parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds to wait on the ADFS and STS requests",
        default=base_client.DEFAULT_TIMEOUT,
    )
    arg_parser.add_argument("-V", "--version", action="version", version=__version__)
    arg_parser.add_argument(
        "-D",
        "--debug",
        action="store_true",
        help=(
            "Enable DEBUG logging - note, this is "
            "extremely verbose, so be careful where "
            "you paste it!"
        ),
        default=False,
    )

    subparsers = arg_parser.add_subparsers(dest="command", required=True)
    login_parser = subparsers.add_parser(
        "login", help="Log in to ADFS and assume the target role"
    )
    login_parser.add_argument(
        "-u", "--username", type=str, help="ADFS Login Name", required=True
    )
    login_parser.add_argument(
        "-t",
        "--target-role-arn",
        type=str,
        help="ARN of the role to assume with the federated session",
        required=True,
    )
    login_parser.add_argument(
        "-a",
        "--ad-role",
        type=str,
        help=(
            "Suffix of the federated role ARN to pick out of the SAML "
            "assertion - ie, Admin for arn:aws:iam::123:role/Admin"
        ),
        required=True,
    )
    login_parser.add_argument(
        "-r",
        "--role-session-name",
        type=str,
        help="Session name for the target role",
        required=True,
    )
    login_parser.add_argument(
        "password",
        type=str,
        nargs="?",
        help="ADFS password - prompted for when left out",
        default=None,
    )

    return arg_parser.parse_args(args=argv[1:])


def entry_point():
    """Zero-argument entry point for use with setuptools/distribute."""
    args = get_config_parser(sys.argv)
    try:
        auth.login(
            config=config.Config(
                host=args.ad_url,
                creds_file=args.temp_creds_file,
                region=args.region,
                timeout=args.timeout,
            ),
            username=args.username,
            target_role_arn=args.target_role_arn,
            role_filter=args.ad_role,
            session_name=args.role_session_name,
            password=args.password,
            debug=args.debug,
        )
    except base_client.BaseException:
        sys.exit(1)


if __name__ == "__main__":
    entry_point()
