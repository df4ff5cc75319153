# sitecheck/__init__.py
"""
SiteCheck package initializer.
Defines package version; the CLI lives in :mod:`sitecheck.cli`.
"""
__version__ = "0.1.0"
