"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks both features use (DB wiring,
settings, logging, errors, paging). Keep feature-specific SQL and business
logic in the corresponding feature package (e.g. `articles/`).
"""
