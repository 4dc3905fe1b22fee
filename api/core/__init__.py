"""
Process-wide wiring for the album service: the config file loader and the
MongoDB client shared by every request.
"""
