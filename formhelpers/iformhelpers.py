# -*- test-case-name: formhelpers.test.test_helpers -*-

"""
Public interfaces used in FormHelpers.
"""

from zope.interface import Interface, Attribute


class IBoundFormHelpers(Interface):
    """
    Form helpers for the fields of a single object.  The object name is
    already known, so field helpers take the field as their first argument.
    """

    name = Attribute(
        """
        The object name bound to every field helper.
        """)


    def label(field, display=None, attributes=None):
        """
        @return: a C{<label>} for C{field}.
        """


    def input(field=None, attributes=None):
        """
        @return: a text C{<input>} for C{field}.
        """


    def password(field=None, attributes=None):
        """
        @return: a password C{<input>} for C{field}.
        """


    def hidden(field=None, attributes=None):
        """
        @return: a hidden C{<input>} for C{field}.
        """


    def textarea(field=None, content='', attributes=None):
        """
        @return: a C{<textarea>} for C{field}.
        """


    def checkbox(field, values, attributes=None, join=None, label=True,
                 checked=()):
        """
        @return: a group of checkboxes for C{field}, one per value.
        """


    def radio(field, values, attributes=None, join=None, label=True,
              checked=()):
        """
        @return: a group of radio buttons for C{field}, one per value.
        """


    def select(field, values, attributes=None):
        """
        @return: a single-choice C{<select>} for C{field}.
        """


    def fieldset(legend=None, block=None):
        """
        @return: a nested C{<fieldset>} for the same object.
        """


    def link(content, href=None, attributes=None):
        """
        @return: an C{<a>} element.
        """


    def submit(value='Submit', attributes=None):
        """
        @return: a submit button.
        """


    def reset(value='Reset', attributes=None):
        """
        @return: a reset button.
        """


    def button(value, attributes=None):
        """
        @return: a general purpose button.
        """


    def form(action, method='get', attributes=None, block=None):
        """
        @return: a C{<form>} element.
        """



class IFormHelpers(Interface):
    """
    The complete set of form markup helpers.  Field helpers take the object
    name first and the field name second.
    """

    def getParameters():
        """
        @return: the mapping of submitted request parameters used to populate
            fields.
        """


    def label(obj, field, display=None, attributes=None):
        """
        @return: a C{<label>} whose C{for} names the field's C{id}.
        """


    def input(obj, field=None, attributes=None):
        """
        @return: an C{<input>}, C{type="text"} unless otherwise specified.
        """


    def password(obj, field=None, attributes=None):
        """
        @return: an C{<input type="password">}.
        """


    def hidden(obj, field=None, attributes=None):
        """
        @return: an C{<input type="hidden">}.
        """


    def textarea(obj, field=None, content='', attributes=None):
        """
        @return: a C{<textarea>} holding the resolved content.
        """


    def checkbox(obj, field, values, attributes=None, join=None, label=True,
                 checked=()):
        """
        @return: checkboxes for C{values}, optionally labelled.
        """


    def radio(obj, field, values, attributes=None, join=None, label=True,
              checked=()):
        """
        @return: radio buttons for C{values}, optionally labelled.
        """


    def select(obj, field, values, attributes=None):
        """
        @return: a C{<select>} with an C{<option>} per value.
        """


    def fieldset(obj, legend=None, block=None):
        """
        Call C{block} with an L{IBoundFormHelpers} provider for C{obj} and wrap
        its result in a C{<fieldset>}.
        """


    def link(content, href=None, attributes=None):
        """
        @return: an C{<a>} element.
        """


    def submit(value='Submit', attributes=None):
        """
        @return: a submit button.
        """


    def reset(value='Reset', attributes=None):
        """
        @return: a reset button.
        """


    def button(value, attributes=None):
        """
        @return: a general purpose button.
        """


    def form(action, method='get', attributes=None, block=None):
        """
        Call C{block} and wrap its result in a C{<form>} carrying a hidden
        C{_method} input.
        """
