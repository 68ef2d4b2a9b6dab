"""Bookings app package.

Hotel room bookings: creation, lookup by identifier and listing. Requests
are turned into commands and queries and dispatched through the message
bus built in ``bootstrap``; bookings are stored as JSON documents.
"""
