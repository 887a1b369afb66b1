"""Run the notification demo with `python -m solid_notify`."""

from solid_notify.main import run

run()
