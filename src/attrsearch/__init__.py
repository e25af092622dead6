"""attrsearch - typed attribute catalog, dynamic filter search and access hierarchy."""

__version__ = "0.1.0"
