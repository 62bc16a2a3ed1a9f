import base64

PRINCIPAL_ARN = "arn:aws:iam::111111111111:saml-provider/ADFS"
ADMIN_ROLE_ARN = "arn:aws:iam::111111111111:role/Admin"
DEV_ROLE_ARN = "arn:aws:iam::111111111111:role/Dev"

SAML_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<samlp:Response xmlns:samlp="urn:oasis:names:tc:SAML:2.0:protocol"
    ID="_1" Version="2.0" IssueInstant="2024-01-01T00:00:00.000Z">
  <Issuer xmlns="urn:oasis:names:tc:SAML:2.0:assertion">http://adfs.example.com/adfs/services/trust</Issuer>
  <samlp:Status><samlp:StatusCode Value="urn:oasis:names:tc:SAML:2.0:status:Success" /></samlp:Status>
  <Assertion xmlns="urn:oasis:names:tc:SAML:2.0:assertion" ID="_2" Version="2.0">
    <AttributeStatement>
      <Attribute Name="https://aws.amazon.com/SAML/Attributes/RoleSessionName">
        <AttributeValue>bob@example.com</AttributeValue>
      </Attribute>
{role_attribute}
    </AttributeStatement>
  </Assertion>
</samlp:Response>"""

ROLE_ATTRIBUTE_TEMPLATE = """      <Attribute Name="https://aws.amazon.com/SAML/Attributes/Role">
{values}
      </Attribute>"""

LOGIN_RESPONSE_TEMPLATE = """<html><head><title>Working...</title></head><body>
<form method="POST" name="hiddenform" action="https://signin.aws.amazon.com:443/saml">
<input type="hidden" name="SAMLResponse" value="{token}" />
<noscript><p>Script is disabled. Click Submit to continue.</p></noscript>
</form>
<script language="javascript">window.setTimeout('document.forms[0].submit()', 0);</script>
</body></html>"""

LOGIN_PAGE = """<html><body>
<form method="post" id="loginForm" action="/adfs/ls/?SAMLRequest=abc">
<input id="userNameInput" name="UserName" type="email" value="" />
<input id="passwordInput" name="Password" type="password" />
<input id="optionForms" type="hidden" name="AuthMethod" value="FormsAuthentication" />
<input id="kmsiInput" type="hidden" name="Kmsi" value="true" />
</form>
</body></html>"""


def saml_xml(roles=(PRINCIPAL_ARN + "," + ADMIN_ROLE_ARN, PRINCIPAL_ARN + "," + DEV_ROLE_ARN)):
    """Returns a SAML Response document, optionally without a Role attribute"""
    if roles is None:
        role_attribute = ""
    else:
        role_attribute = ROLE_ATTRIBUTE_TEMPLATE.format(
            values="\n".join(
                "        <AttributeValue>{}</AttributeValue>".format(x) for x in roles
            )
        )
    return SAML_TEMPLATE.format(role_attribute=role_attribute)


def encode(xml):
    return base64.b64encode(xml.encode("utf-8")).decode("ascii")


def login_response(token):
    return LOGIN_RESPONSE_TEMPLATE.format(token=token)


SAML_TOKEN = encode(saml_xml())
LOGIN_RESPONSE = login_response(SAML_TOKEN)

SESSION_CREDENTIALS = {
    "AccessKeyId": "ASIASESSION",
    "SecretAccessKey": "session-secret",
    "SessionToken": "session-token",
    "Expiration": "2024-01-01T01:00:00Z",
}

TARGET_CREDENTIALS = {
    "AccessKeyId": "AKIA1",
    "SecretAccessKey": "secret1",
    "SessionToken": "token1",
    "Expiration": "2024-01-01T01:00:00Z",
}

CALLER_IDENTITY = {
    "UserId": "AROAEXAMPLE:bob-deploy",
    "Account": "123456789012",
    "Arn": "arn:aws:sts::123456789012:assumed-role/Deploy/bob-deploy",
}

EXPECTED_CREDS_FILE = (
    "export AWS_ACCESS_KEY_ID=AKIA1\n"
    "export AWS_SECRET_ACCESS_KEY=secret1\n"
    "export AWS_SESSION_TOKEN=token1\n"
    "export AWS_ACCOUNT_ID=123456789012"
)
