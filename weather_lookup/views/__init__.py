"""View rendering module for HTML templates.

This module handles all HTML/template rendering logic, separate from API routers.
Views read display state, prepare context data and render Jinja2 templates.
"""
