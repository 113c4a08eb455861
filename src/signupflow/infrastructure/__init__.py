"""Infrastructure layer for SignupFlow.

Implementations of the external collaborators the domain depends on.
"""
