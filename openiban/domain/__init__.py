"""Domain layer for IBAN validation.

Contains the enums and immutable value objects shared by the rule registry,
the validation engine and the rendering collaborators.
"""
