"""
Pydantic schema definitions for API payloads.

Schemas describe both the request/response bodies and the objects
held in the JSON record store.  Field names are snake_case in Python
and camelCase on the wire and on disk.
"""
