"""SignupFlow - client-side account creation workflow.

Validates a username and password locally, submits them to a signup
endpoint and maps the response to a user-facing outcome.
"""

__version__ = "0.1.0"
