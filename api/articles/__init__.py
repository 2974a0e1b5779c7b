"""
Article catalog feature: schemas, persistence, service and HTTP routes.
"""
