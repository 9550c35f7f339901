"""Music API.

REST resource server exposing CRUD operations over music tracks, with
validation, zero-based pagination and soft deletion.
"""

__version__ = "0.1.0"
