"""
Asset Discovery

Reads the operating system ARP/neighbor cache, resolves hardware vendors from
an IEEE OUI database, and expands IPv4 CIDR blocks into address lists.
"""

__version__ = "1.0.0"
__author__ = "Asset Discovery Team"
