"""Domain layer - structured error values and their contracts.

Contains the Error capability protocol, the composable BaseError, the
attribute narrowing rules and the GenericError domain type. Pure Python:
no logging, no I/O.
"""
