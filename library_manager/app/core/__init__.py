"""
Core infrastructure: settings, logging, error kinds, persistence
adapters and the catalog store shared by the services.
"""
