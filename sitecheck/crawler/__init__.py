# sitecheck/crawler/__init__.py
"""Homepage verification, consent handling and one-hop link crawling."""
