"""
API package containing the HTTP routes.

``router`` in :mod:`.router` aggregates the domain routers found in
``endpoints`` and is mounted by ``main`` under the configured prefix.
"""
