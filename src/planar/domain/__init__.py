"""
Domain Layer - Core Geometry

This layer contains the point value object, the capability protocols it
consumes and the domain exceptions. It is independent of configuration,
logging setup and presentation concerns.
"""
