"""
Demo HTTP layer: a FastAPI app serving a lumui dashboard.
"""
