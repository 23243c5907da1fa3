"""
Core value types for cloudclock.

Contains the logical timestamp, the vector timestamp built from it, the
relation enum returned by comparisons, and the library's exceptions.
"""
