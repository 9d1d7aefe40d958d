"""Print unread direct messages that are due for an email as JSON."""

from django.core.management.base import BaseCommand

from core.management.commands._json_output import render_results
from core.services.unread_message_finder import UnreadMessageFinder


class Command(BaseCommand):
    """Run the unread message finder."""

    help = "Find unread direct messages whose receiver should be emailed"

    def add_arguments(self, parser):
        """Register command arguments."""
        parser.add_argument("--indent", type=int, default=2)
        parser.add_argument(
            "--lookback",
            type=int,
            default=None,
            help="Lookback interval in minutes (default: from settings)",
        )

    def handle(self, *_args, **options):
        """Find unread messages and write them to stdout."""
        finder = UnreadMessageFinder(lookback_interval=options["lookback"])
        results = finder.find_unread_direct_messages()

        self.stdout.write(render_results(results, options["indent"]))
        self.stderr.write(self.style.SUCCESS(f"{len(results)} unread thread(s) found"))
