"""
EOQ Meme Platform

Scores belief units ("memes") by their Existence Optimization Quotient and
refines partially-defined values with Null/Not-Null logic.
"""

__version__ = "1.0.0"
