"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(DB wiring, env config, logging). Keep feature-specific SQL and sync logic
in the corresponding feature package (e.g. `sync/`).
"""
