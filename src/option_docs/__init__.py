"""
Completeness checks for generated configuration option documentation.

"""
