"""
mgmtops - cloud resource-management operations toolkit.

Users can import as: from mgmtops.domain import ... or import mgmtops.cli
"""

__version__ = "0.1.0"
