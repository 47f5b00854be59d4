"""
Django runserver that listens on settings.PORT when no address is given.

Usage:
    PORT=5000 python manage.py runserver
"""

from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    help = "Start the development server on PORT (default 8000)"

    default_port = str(settings.PORT)
