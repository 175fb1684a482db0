"""HTTP access to the CDMS API."""
from cdms_console.api.client import ApiClient

__all__ = ["ApiClient"]
