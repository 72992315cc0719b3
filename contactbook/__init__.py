"""In-memory contact book with admin and staff users, contacts and contact details."""

__version__ = "0.1.0"
__all__ = ["__version__"]