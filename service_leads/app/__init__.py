"""
Leads client application package.

Holds the read-through caches, the backend API adapter, and the read-heavy
services that combine them.
"""
