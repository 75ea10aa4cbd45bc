"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
settings, logging, error kinds). Feature-specific SQL and business rules live
in the feature packages (`students/`, `donations/`).
"""
