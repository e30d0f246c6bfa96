"""Contracts package.

This package defines the *public* cross-service contracts: service names, stream names,
consumer groups and the static routing table between them. Services may only share
identifiers via `event_contracts.contracts` and `event_contracts.events`.
"""
