#!/usr/bin/env python
"""Script to run the Django development server for the digest service."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    """Run the Django development server.

    Uses the custom 'runlocal' command, which skips migration checks because
    the schema belongs to the main application.
    """
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "digest_service.settings")
    execute_from_command_line([sys.argv[0], "runlocal"])


if __name__ == "__main__":
    main()
