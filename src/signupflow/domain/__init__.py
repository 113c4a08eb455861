"""Domain layer for SignupFlow."""
