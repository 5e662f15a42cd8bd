"""Routing — ordered route table with parameterized path patterns.

Exact paths are looked up directly; everything else is matched in
definition order against patterns compiled to anchored regexes.
"""
