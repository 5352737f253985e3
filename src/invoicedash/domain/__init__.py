"""Domain layer for invoicedash.

Services are imported from their own modules (e.g.
``invoicedash.domain.invoice``); this package does not re-export them so
that the database layer can import ``invoicedash.domain.entities``
without pulling the services back in.
"""
