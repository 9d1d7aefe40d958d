"""Django project package for the notification digest service."""
