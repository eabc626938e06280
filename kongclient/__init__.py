"""Client library for the Kong Admin API: consumers, credentials, CA certificates, developer roles, admins and custom entity endpoints."""

__version__ = "0.1.0"