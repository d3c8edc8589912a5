"""
Creative Marketplace API - clients book creative professionals, message them,
receive deliverables, leave reviews and post gigs.
"""

__version__ = "1.0.0"
