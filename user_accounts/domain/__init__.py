"""
Domain layer: value objects, the User entity, persisted record shapes,
the Result type, errors, and the ports the use cases depend on.
"""
