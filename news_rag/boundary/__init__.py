"""
Boundary layer: persistence and external feed access.
"""
