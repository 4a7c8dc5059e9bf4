"""
Boundary layer for external system integrations.

Handles all interactions with external systems (document service, completion
provider). Provides clients that translate transport failures into domain
exceptions.
"""
