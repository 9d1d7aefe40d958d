"""Register the email dispatch cron jobs with the RQ scheduler."""

from django.core.management.base import BaseCommand, CommandError

from core.exceptions import ConfigurationError
from core.jobs.dispatch_jobs import schedule_dispatch_jobs


class Command(BaseCommand):
    """Apply DISPATCH_SCHEDULES, replacing previously scheduled dispatch jobs."""

    help = "Schedule the notification and unread message dispatch jobs"

    def handle(self, *_args, **_options):
        """Schedule the jobs."""
        try:
            job_ids = schedule_dispatch_jobs()
        except ConfigurationError as e:
            raise CommandError(str(e)) from e

        self.stdout.write(
            self.style.SUCCESS(f"Scheduled {len(job_ids)} dispatch job(s)")
        )
