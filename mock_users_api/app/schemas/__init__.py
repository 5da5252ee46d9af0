"""
Schema definitions for API payloads.

Pydantic models describe products and error bodies; the user module
also carries the declarative validation rules applied to user
requests.
"""
