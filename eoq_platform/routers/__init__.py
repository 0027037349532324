"""
Routers Package - EOQ Meme Platform
eoq_platform/routers/__init__.py
"""
