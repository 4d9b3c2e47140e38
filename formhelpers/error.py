# -*- test-case-name: formhelpers.test.test_helpers -*-

"""
Exception definitions for FormHelpers.
"""


class FormHelperError(Exception):
    """
    Base class for all exceptions raised by the form helpers.
    """



class InvalidUsage(FormHelperError):
    """
    Exception raised when a helper is called in a way it cannot support, such
    as a C{fieldset} or C{form} with no block to produce its content.
    """
