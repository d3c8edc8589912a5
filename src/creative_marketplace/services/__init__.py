"""
Domain services: each wraps the queries and mutations of one marketplace area
"""
