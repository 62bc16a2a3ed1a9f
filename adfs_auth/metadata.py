__desc__ = "ADFS SAML to AWS STS credential exchanger"
__version__ = "0.1.0"
