"""Client library for a contact-form content-management backend."""

__version__ = "0.1.0"
