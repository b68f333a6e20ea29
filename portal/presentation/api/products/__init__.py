"""
Endpoints REST des produits (router + schemas).
"""
