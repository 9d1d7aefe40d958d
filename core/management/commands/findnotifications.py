"""Print the notifications due for an email frequency as JSON.

Running this stamps the returned notifications exactly like the scheduled
dispatch job does; they will not be returned again for the same frequency.
"""

from django.core.management.base import BaseCommand, CommandError

from core.enums import EmailFrequency
from core.exceptions import UnsupportedFrequencyError
from core.management.commands._json_output import render_results
from core.services.notification_finder import NotificationFinder


class Command(BaseCommand):
    """Run the notification finder for one frequency tier."""

    help = "Find (and stamp) notifications due for an email frequency"

    def add_arguments(self, parser):
        """Register command arguments."""
        parser.add_argument(
            "frequency",
            help=f"One of: {', '.join(EmailFrequency.values())}",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=2,
            help="JSON indentation (default: 2)",
        )
        parser.add_argument(
            "--lookback",
            type=int,
            default=None,
            help="Instant lookback interval in minutes (default: from settings)",
        )

    def handle(self, *_args, **options):
        """Find notifications and write them to stdout."""
        finder = NotificationFinder(lookback_interval=options["lookback"])
        try:
            results = finder.find_notifications(options["frequency"])
        except UnsupportedFrequencyError as e:
            raise CommandError(str(e)) from e

        self.stdout.write(render_results(results, options["indent"]))
        self.stderr.write(
            self.style.SUCCESS(
                f"{len(results)} {options['frequency']} result(s) found"
            )
        )
