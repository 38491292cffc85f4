"""
r2json utilities: configuration, reflection and coercion helpers.
"""
