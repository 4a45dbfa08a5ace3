# complycube/services/__init__.py

"""
ComplyCube service clients.

Each client wraps one area of the API and returns ApiResponse envelopes.
"""

from .company_lookup import CompanyLookupClient
from .screening import ScreeningClient

__all__ = ["CompanyLookupClient", "ScreeningClient"]
