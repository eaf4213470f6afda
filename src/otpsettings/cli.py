"""Flask CLI commands for OTP settings."""

from __future__ import annotations

import click


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("otp-seed")
    def otp_seed() -> None:
        """Create the default OTP settings if the store is empty."""

        from .errors import RetrievalError
        from .extensions import get_settings_service

        try:
            settings = get_settings_service(app).get_settings()
        except RetrievalError as exc:
            raise click.ClickException(exc.message) from exc
        click.echo(f"{len(settings)} OTP settings present.")

    @app.cli.command("otp-list")
    def otp_list() -> None:
        """Print every stored OTP setting."""

        from .errors import RetrievalError
        from .extensions import get_settings_service

        try:
            settings = get_settings_service(app).list_settings()
        except RetrievalError as exc:
            raise click.ClickException(exc.message) from exc
        if not settings:
            click.echo("No OTP settings stored. Run `flask otp-seed` to create the defaults.")
            return
        for setting in settings:
            click.echo(
                f"{setting.id}  {setting.action or '-':<20} "
                f"email={'on' if setting.email_enabled else 'off'} "
                f"whatsapp={'on' if setting.whatsapp_enabled else 'off'}"
            )
