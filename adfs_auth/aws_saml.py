# -*- coding: utf-8 -*-
"""
aws_saml
^^^^^^^^

Pulls the SAMLResponse out of an ADFS login page, decodes it and picks the
AWS role the user asked for out of its Role attribute.
"""

import base64
import collections
import logging
import xml.etree.ElementTree as ET

import bs4

from adfs_auth import base_client

log = logging.getLogger(__name__)

ROLE_ATTRIBUTE_SUFFIX = "/Role"


class ParseError(base_client.BaseException):
    """The login response did not look like a SAML POST form"""


class MissingToken(ParseError):
    """No single SAMLResponse value found in the login response"""


class InvalidEncoding(ParseError):
    """SAMLResponse value is not base64 encoded UTF-8"""


class InvalidAssertion(ParseError):
    """Decoded SAMLResponse is not a Response/Assertion document"""


class RoleError(base_client.BaseException):
    """The assertion does not grant a usable role"""


class RoleAttributeMissing(RoleError):
    """No */Role attribute in the assertion"""


class MalformedRole(RoleError):
    """Role attribute value is not a principal,role pair"""


class RoleNotFound(RoleError):
    """No granted role matches the requested one"""


def _local_name(tag):
    return tag.rsplit("}", 1)[-1]


def _children(element, name):
    return [x for x in element if _local_name(x.tag) == name]


def _child(element, name):
    children = _children(element, name)
    if len(children) != 1:
        raise InvalidAssertion(
            "Expected one {name} under {parent}, found {count}".format(
                name=name, parent=_local_name(element.tag), count=len(children)
            )
        )
    return children[0]


def extract_token(body):
    """Finds the base64 SAMLResponse in an ADFS login response.

    ADFS answers a successful login with an auto-submitting form whose one
    hidden input holds the SAMLResponse. Anything else (a login page shown
    again, an MFA challenge) has no such input, or more than one.
    """
    soup = bs4.BeautifulSoup(body, "html.parser")
    inputs = [x for form in soup.find_all("form") for x in form.find_all("input")]

    named = [x for x in inputs if x.get("name") == "SAMLResponse"]
    if named:
        candidates = [x for x in named if x.has_attr("value")]
    else:
        candidates = [
            x
            for x in inputs
            if x.get("type", "hidden").lower() == "hidden" and x.has_attr("value")
        ]

    if not candidates:
        raise MissingToken("No SAMLResponse found in the login response")
    if len(candidates) > 1:
        raise MissingToken(
            "Expected one SAMLResponse in the login response, found {count}".format(
                count=len(candidates)
            )
        )

    return candidates[0]["value"]


def decode_token(token):
    try:
        return base64.b64decode(token, validate=True).decode("utf-8")
    except ValueError as e:
        # binascii.Error and UnicodeDecodeError are both ValueErrors
        raise InvalidEncoding("Cannot decode SAMLResponse: {err}".format(err=e)) from e


class RoleEntry(collections.namedtuple("RoleEntry", ["principal_arn", "role_arn"])):
    __slots__ = ()

    @classmethod
    def parse(cls, value):
        """Splits a Role attribute value into its principal and role ARNs.

        Values are exactly "principal_arn,role_arn". Anything with more or
        fewer fields is rejected rather than guessed at.
        """
        fields = [x.strip() for x in (value or "").split(",")]
        if len(fields) != 2 or not all(fields):
            raise MalformedRole(
                "Role attribute value {value!r} is not a principal,role pair".format(
                    value=value
                )
            )
        return cls(*fields)


class SamlAssertion:
    def __init__(self, token):
        self.encoded = token
        self.attributes = self._parse(decode_token(token))

    @classmethod
    def from_response(cls, body):
        return cls(extract_token(body))

    @staticmethod
    def _parse(xml):
        try:
            root = ET.fromstring(xml)
        except ET.ParseError as e:
            raise InvalidAssertion("SAMLResponse is not XML: {err}".format(err=e)) from e

        if _local_name(root.tag) != "Response":
            raise InvalidAssertion(
                "Expected a Response document, got {tag}".format(
                    tag=_local_name(root.tag)
                )
            )

        statement = _child(_child(root, "Assertion"), "AttributeStatement")

        attributes = []
        for attribute in _children(statement, "Attribute"):
            name = attribute.get("Name")
            if name is None:
                raise InvalidAssertion("Attribute without a Name")
            values = [
                (x.text or "").strip()
                for x in _children(attribute, "AttributeValue")
            ]
            attributes.append((name, values))

        log.debug(
            "Assertion carries attributes: {names}".format(
                names=", ".join(name for name, _ in attributes)
            )
        )
        return attributes

    def role_values(self):
        for name, values in self.attributes:
            if name.endswith(ROLE_ATTRIBUTE_SUFFIX):
                if not values:
                    raise RoleAttributeMissing(
                        "Role attribute {name} has no values".format(name=name)
                    )
                return values
        raise RoleAttributeMissing("No Role attribute found in the SAML assertion")

    def roles(self):
        return [RoleEntry.parse(x) for x in self.role_values()]

    def select_role(self, role_filter):
        """Picks the first granted role whose ARN ends with role_filter.

        Roles are checked in the order the IdP listed them, so a filter
        shared by several roles always picks the same (first) one.
        """
        roles = self.roles()
        if role_filter:
            for role in roles:
                if role.role_arn.endswith(role_filter):
                    log.debug("Selected role {role}".format(role=role.role_arn))
                    return role

        raise RoleNotFound(
            "Specified AD role does not exist or you don't have access "
            "[role: {role}]".format(role=role_filter)
        )
