"""
Pure helpers (no state) used by the containers.
"""
