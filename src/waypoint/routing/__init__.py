"""Routing — specificity-sorted route table with positional URL matching.

Routes are normalized once into an immutable table; parsing and
serializing read it and never change it.
"""
