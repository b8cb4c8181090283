"""Доменный слой dualschedule."""
