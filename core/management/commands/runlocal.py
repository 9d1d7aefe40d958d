"""Development server that skips migration checks.

The users, threads, messages and notifications tables belong to the main
application, so there are no migrations to check.
"""

from django.core.management.commands.runserver import Command as RunServer


class Command(RunServer):
    """runserver without the unapplied-migrations check."""

    help = "Start development server without migration checks"

    def check_migrations(self, *_args, **_kwargs):
        """Report that migration checks are skipped."""
        self.stdout.write(
            self.style.WARNING("Skipping migration checks (schema is owned externally)")
        )
