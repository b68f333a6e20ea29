"""
Endpoints REST des contributeurs (router + schemas).
"""
