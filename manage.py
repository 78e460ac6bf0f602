#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys


def main():
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

    from django.conf import settings
    from django.core.management import execute_from_command_line
    from django.core.management.commands.runserver import Command as RunserverCommand

    # `runserver` without an explicit port listens on PORT
    RunserverCommand.default_port = settings.PORT

    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
