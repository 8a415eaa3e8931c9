"""
Dashboard rendering: components and page scaffolding.
"""
