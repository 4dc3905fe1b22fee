"""
Album records: HTTP routes, business logic, MongoDB persistence and the
in-process mirror of the collection.
"""
