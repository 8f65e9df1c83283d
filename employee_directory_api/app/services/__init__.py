"""
Service layer abstraction.

``query_service`` holds the pure search and sort logic applied on
read; ``employee_service`` performs the create, update and delete
operations against the record store.  API handlers call the services
and never touch the store directly.
"""
