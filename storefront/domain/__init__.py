"""
Domain layer package.

Contains pure business objects: entities, the error catalog,
and port interfaces. No framework imports, no IO.
"""
