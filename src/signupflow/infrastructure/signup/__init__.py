"""Signup endpoint gateways."""

from signupflow.infrastructure.signup.http_signup_client import HttpSignupClient
from signupflow.infrastructure.signup.signup_gateway import SignupGateway, SignupResponse

__all__ = ["HttpSignupClient", "SignupGateway", "SignupResponse"]
