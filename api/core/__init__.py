"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that both entity families use
(DB wiring, settings, logging, the error taxonomy, patch merging). Keep
entity-specific SQL and operations in the corresponding feature package
(e.g. `tutors/`).
"""
