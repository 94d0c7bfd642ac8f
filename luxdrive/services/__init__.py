"""Storefront services.

Each operation takes the acting user's id explicitly; nothing here reads
the request's login session.
"""
