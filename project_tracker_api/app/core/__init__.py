"""
Cross‑cutting infrastructure: settings, logging, locking, exceptions.
"""
