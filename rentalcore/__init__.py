"""
rentalcore - Equipment Rental Quote & Fulfillment Core

Pure pricing and fulfillment logic for the rental storefront.
No I/O, no global state - callers pass everything in.
"""

__version__ = "0.1.0"
