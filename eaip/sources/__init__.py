"""
Data sources for the eaip library.

Sources fetch eAIP pages and hand them to the parsers; the parsers
themselves never touch the network.
"""

from .cached import CachedSource
from .eaip_web import EAIPWebSource
from .ais import NamedEAIP, get_service

__all__ = [
    'CachedSource',
    'EAIPWebSource',
    'NamedEAIP',
    'get_service',
]
