"""Game domain services: rules engine and room registry.

This package contains pure domain logic that should be imported by the
socket handlers, HTTP routes and the console harness, keeping transport
concerns separated from core game mechanics.
"""
