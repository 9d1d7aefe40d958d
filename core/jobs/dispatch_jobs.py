"""Background jobs that hand due emails over to the email service.

The finders select what should be emailed and stamp it; these jobs serialize
the results and enqueue one job per email on the email service's queue. The
receiving jobs live in the email service and are enqueued by dotted path
(``EMAIL_SENDER_JOBS``).
"""

import uuid
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from django.conf import settings

import django_rq
import structlog
from rq import get_current_job

from core.constants import (
    DISPATCH_JOB_DESCRIPTION_PREFIX,
    EMAIL_KIND_DIGEST,
    EMAIL_KIND_INSTANT,
    EMAIL_KIND_MESSAGE,
)
from core.enums import EmailFrequency
from core.logging.context import clear_correlation_id, set_correlation_id
from core.schemas.base_schema_model import BaseSchemaModel
from core.services.notification_finder import notification_finder, parse_frequency
from core.services.unread_message_finder import unread_message_finder

logger = structlog.get_logger(__name__)


@contextmanager
def _job_correlation() -> Iterator[str]:
    job = get_current_job()
    correlation_id = job.id if job is not None else str(uuid.uuid4())
    set_correlation_id(correlation_id)
    try:
        yield correlation_id
    finally:
        clear_correlation_id()


def _enqueue_emails(
    kind: str, results: Sequence[BaseSchemaModel], **job_kwargs: Any
) -> int:
    queue = django_rq.get_queue(settings.EMAIL_QUEUE_NAME)
    job_path = settings.EMAIL_SENDER_JOBS[kind]
    for result in results:
        payload = result.model_dump(mode="json", by_alias=True)
        queue.enqueue(job_path, payload, **job_kwargs)
    return len(results)


def dispatch_notifications_job(frequency: str) -> int:
    """Find notifications due for ``frequency`` and enqueue their emails.

    Instant notifications produce one email each; digest tiers produce one
    email per receiver.

    Args:
        frequency: Email frequency value (instant, daily, weekly, biweekly)

    Returns:
        Number of emails enqueued

    Raises:
        UnsupportedFrequencyError: If the frequency is unknown.
    """
    with _job_correlation():
        tier = parse_frequency(frequency)
        results = notification_finder.find_notifications(tier)
        kind = (
            EMAIL_KIND_INSTANT if tier == EmailFrequency.INSTANT else EMAIL_KIND_DIGEST
        )

        enqueued = _enqueue_emails(kind, results, frequency=tier.value)

        logger.info(
            "notification_emails_enqueued",
            frequency=tier.value,
            kind=kind,
            count=enqueued,
        )
        return enqueued


def dispatch_unread_messages_job() -> int:
    """Find stale unread direct messages and enqueue their emails.

    Returns:
        Number of emails enqueued
    """
    with _job_correlation():
        results = unread_message_finder.find_unread_direct_messages()
        enqueued = _enqueue_emails(EMAIL_KIND_MESSAGE, results)

        logger.info("message_emails_enqueued", count=enqueued)
        return enqueued


def schedule_dispatch_jobs() -> list[str]:
    """Register the ``DISPATCH_SCHEDULES`` cron jobs with the RQ scheduler.

    Dispatch jobs registered by an earlier call are cancelled first, so the
    schedule can be re-applied after a deploy without duplicating jobs.

    Returns:
        IDs of the scheduled jobs

    Raises:
        UnsupportedFrequencyError: If a schedule names an unknown frequency.
    """
    schedules = settings.DISPATCH_SCHEDULES
    # Validate everything before touching the scheduler
    for schedule in schedules:
        if schedule["frequency"] is not None:
            parse_frequency(schedule["frequency"])

    scheduler = django_rq.get_scheduler("default")

    cancelled = 0
    for job in scheduler.get_jobs():
        if (job.description or "").startswith(DISPATCH_JOB_DESCRIPTION_PREFIX):
            scheduler.cancel(job)
            cancelled += 1

    job_ids = []
    for schedule in schedules:
        frequency = schedule["frequency"]
        if frequency is None:
            func, args, name = dispatch_unread_messages_job, [], EMAIL_KIND_MESSAGE
        else:
            frequency = parse_frequency(frequency).value
            func, args, name = dispatch_notifications_job, [frequency], frequency

        job = scheduler.cron(
            schedule["cron"],
            func=func,
            args=args,
            queue_name="default",
            description=f"{DISPATCH_JOB_DESCRIPTION_PREFIX}{name}",
        )
        job_ids.append(job.id)

        logger.info("dispatch_job_scheduled", name=name, cron=schedule["cron"])

    logger.info("dispatch_jobs_scheduled", scheduled=len(job_ids), cancelled=cancelled)
    return job_ids
