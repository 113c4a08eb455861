"""Command-line interface for SignupFlow.

A terminal host for the signup form: it feeds user input into a
SignupController and prints the outcome.
"""

import asyncio
from typing import NoReturn

import click

from signupflow import __version__
from signupflow.core.config import Settings, get_settings
from signupflow.core.hooks import FormEvent
from signupflow.core.logging import configure_logging, get_logger
from signupflow.domain.entities.signup_outcome import SignupFailure
from signupflow.domain.exceptions import PasswordPolicyError, SignupError
from signupflow.domain.services import SignupController, default_password_validator
from signupflow.infrastructure.signup import HttpSignupClient


def _load_settings(ctx: click.Context) -> Settings:
    settings = get_settings()
    log_level = ctx.obj.get("log_level") if ctx.obj else None
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)
    return settings


def _ensure_submittable(controller: SignupController) -> None:
    """Raise if the controller would reject a submission."""
    if not controller.is_username_valid:
        raise click.UsageError("Username is required")
    if not controller.is_password_valid:
        raise PasswordPolicyError(
            "Password does not meet the requirements",
            unmet_rules=controller.unmet_rules,
        )


def _echo_rules(rules: list[str]) -> None:
    for rule in rules:
        click.echo(f"  - {rule}", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="SignupFlow")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides SIGNUPFLOW_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """SignupFlow - create an account on the signup endpoint."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level


@cli.command("check-password")
@click.argument("password", required=False)
@click.pass_context
def check_password(ctx: click.Context, password: str | None) -> None:
    """Check a password against the local rules without submitting it."""
    _load_settings(ctx)

    if password is None:
        password = click.prompt("Password", hide_input=True, default="", show_default=False)

    unmet = default_password_validator.evaluate(password)
    if unmet:
        click.echo("Password does not meet the requirements:", err=True)
        _echo_rules(unmet)
        raise SystemExit(1)

    click.echo("Password meets all requirements.")


@cli.command("create-user")
@click.option("--username", type=str, default=None, help="Username (prompts if not provided)")
@click.option("--password", type=str, default=None, help="Password (prompts if not provided)")
@click.pass_context
def create_user(ctx: click.Context, username: str | None, password: str | None) -> None:
    """Create an account on the signup endpoint."""
    settings = _load_settings(ctx)
    logger = get_logger(__name__)

    if username is None:
        username = click.prompt("Username", type=str)
    if password is None:
        password = click.prompt("Password", hide_input=True)

    controller = SignupController(HttpSignupClient(settings))
    controller.subscribe(
        lambda event, snapshot, data: click.echo("Creating..."),
        FormEvent.ON_SUBMIT_STARTED,
    )
    controller.set_username(username)
    controller.set_password(password)

    try:
        _ensure_submittable(controller)
        outcome = asyncio.run(controller.submit())
        if outcome is None:
            raise PasswordPolicyError(
                "The form cannot be submitted",
                unmet_rules=controller.unmet_rules,
            )
        if isinstance(outcome, SignupFailure):
            raise outcome.to_exception()
    except PasswordPolicyError as e:
        click.echo(f"Error: {e.message}", err=True)
        _echo_rules(e.unmet_rules)
        raise SystemExit(1)
    except SignupError as e:
        click.echo(f"Error: {e.message}", err=True)
        logger.error("User creation failed via CLI", error_kind=e.kind.value)
        raise SystemExit(1)

    click.echo("User created.")


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Display SignupFlow configuration."""
    settings = _load_settings(ctx)

    click.echo(f"""
SignupFlow v{__version__}
{'=' * 40}

Endpoint:
  URL:          {settings.signup_url}
  Token:        {'configured' if settings.has_auth_token else 'not configured'}
  Timeout:      {settings.request_timeout}s

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the `signupflow` command and `python -m signupflow`."""
    cli()


if __name__ == "__main__":
    main()
