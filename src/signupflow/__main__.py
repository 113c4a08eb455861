"""Entry point for 'python -m signupflow'."""

from signupflow.cli import main

if __name__ == "__main__":
    main()
