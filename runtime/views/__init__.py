"""
View helpers exposed to the Jinja2 templates.
"""
