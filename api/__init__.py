"""Rental storefront HTTP API."""
