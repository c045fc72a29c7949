"""
Shared utilities for the leads client layer.

This package aggregates common building blocks consumed by the client
services:

- config: Client configuration via pydantic-settings
- logging: Structured logging with correlation context
- errors: Canonical error types and responses

Do not import from service_* packages into shared/.
"""
