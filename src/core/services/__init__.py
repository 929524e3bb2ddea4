"""
Business services for Wayfarer.

- trip_resolution.py: trip search and by-id lookup through cache, store and provider
- saved_list.py: saved-list add/remove, merged listing with sort and pagination, export
- health.py: cache and store liveness
- migration.py: programmatic Alembic upgrades
"""

__all__: list[str] = []
