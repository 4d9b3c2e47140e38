# -*- test-case-name: formhelpers.test.test_helpers -*-

"""
Helpers which generate HTML form markup.

L{FormHelpers} is meant to be mixed into whatever object handles a request.
Field helpers take an object name and a field name, derive the C{id} and
C{name} attributes from them (C{name="person[first_name]"}) and populate the
field from the submitted parameters when there are any::

    helpers = FormHelpers({'person': {'first_name': 'Ada'}})
    helpers.label('person', 'first_name')
    helpers.input('person', 'first_name')
    helpers.checkbox('person', 'colors', ['red', 'blue'], checked=['red'])
"""

from zope.interface import implementer

from epsilon.structlike import record

from formhelpers.error import InvalidUsage
from formhelpers.iformhelpers import IFormHelpers, IBoundFormHelpers
from formhelpers.markup import (
    escapeHTML, cssID, fieldName, fieldsetName, titleize, resolveValue,
    tag, singleTag, merged, optionItems)


TEXT_INPUT = 'text'
PASSWORD_INPUT = 'password'
HIDDEN_INPUT = 'hidden'
CHECKBOX_INPUT = 'checkbox'
RADIO_INPUT = 'radio'
SUBMIT_INPUT = 'submit'
RESET_INPUT = 'reset'
BUTTON_INPUT = 'button'

DEFAULT_JOIN = ' '


class GroupOptions(record('join showLabel checked',
                          join=DEFAULT_JOIN,
                          showLabel=True,
                          checked=())):
    """
    Presentation options for a group of checkboxes or radio buttons.  These
    are kept apart from the HTML attributes applied to every input.

    @type join: C{str}
    @ivar join: Markup placed between the inputs of the group.

    @type showLabel: C{bool}
    @ivar showLabel: Whether each input is followed by a generated
        C{<label>}.

    @ivar checked: Values to check regardless of the submitted parameters.
    """
    def isChecked(self, value, current):
        """
        Should the input for C{value} be checked, given the C{current}
        submitted value or values?
        """
        value = str(value)
        return value in _strings(current) or value in _strings(self.checked)



def _strings(values):
    """
    Return the string forms of C{values}, a single value or a sequence of
    them.
    """
    if values is None:
        return frozenset()
    if isinstance(values, (list, tuple, set, frozenset)):
        return frozenset([str(v) for v in values])
    return frozenset([str(values)])



def _blockContent(helper, content):
    """
    Check that a block passed to C{helper} produced markup.

    @raise InvalidUsage: If C{content} is not a string.
    """
    if not isinstance(content, str):
        raise InvalidUsage(
            "Block given to %s() returned %r, not markup" % (helper, content))
    return content



@implementer(IFormHelpers)
class FormHelpers(object):
    """
    Form markup helpers.

    @ivar parameters: The submitted request parameters, as a mapping or a
        no-argument callable returning one.  C{None} means nothing was
        submitted.
    """
    parameters = None

    def __init__(self, parameters=None):
        if parameters is not None:
            self.parameters = parameters


    def getParameters(self):
        """
        Return the submitted parameters mapping.  Request-handling classes
        which keep their parameters elsewhere should override this.
        """
        parameters = self.parameters
        if callable(parameters):
            parameters = parameters()
        if parameters is None:
            return {}
        return parameters


    def _resolve(self, obj, field, default):
        return resolveValue(self.getParameters(), obj, field, default)


    def link(self, content, href=None, attributes=None):
        """
        Link to a URL.  The link text doubles as the URL if no C{href} is
        given.
        """
        if href is None:
            href = content
        return tag('a', escapeHTML(content), merged(attributes, {'href': href}))


    def label(self, obj, field, display=None, attributes=None):
        """
        Label a field.  Without C{display} the label text is derived from the
        field name, so C{first_name} is labelled I{First Name}.
        """
        if display is None or display == '':
            display = titleize(field)
        return tag('label', escapeHTML(display),
                   merged(attributes, {'for': cssID(obj, field)}))


    def input(self, obj, field=None, attributes=None):
        """
        Text input.  A C{value} in C{attributes} is used when the parameters
        hold no value for the field.
        """
        attributes = merged(attributes)
        value = self._resolve(obj, field, attributes.get('value'))
        return singleTag('input', merged(attributes, {
                    'type': attributes.get('type') or TEXT_INPUT,
                    'id': cssID(obj, field),
                    'name': fieldName(obj, field),
                    'value': value}))


    def password(self, obj, field=None, attributes=None):
        return self.input(obj, field, merged(attributes, {'type': PASSWORD_INPUT}))


    def hidden(self, obj, field=None, attributes=None):
        return self.input(obj, field, merged(attributes, {'type': HIDDEN_INPUT}))


    def textarea(self, obj, field=None, content='', attributes=None):
        content = self._resolve(obj, field, content)
        return tag('textarea', escapeHTML(content), merged(attributes, {
                    'id': cssID(obj, field),
                    'name': fieldName(obj, field)}))


    def _button(self, inputType, value, attributes):
        return singleTag('input', merged({
                    'name': inputType,
                    'type': inputType,
                    'value': value,
                    'id': cssID('button', value)}, attributes))


    def submit(self, value='Submit', attributes=None):
        return self._button(SUBMIT_INPUT, value, attributes)


    def reset(self, value='Reset', attributes=None):
        return self._button(RESET_INPUT, value, attributes)


    def button(self, value, attributes=None):
        """
        General purpose button, usually given JavaScript hooks through
        C{attributes}.
        """
        return self._button(BUTTON_INPUT, value, attributes)


    def _group(self, inputType, suffix, obj, field, values, attributes,
               options):
        """
        Render one input of C{inputType} per option in C{values}, each
        optionally followed by its label, joined by C{options.join}.
        """
        current = self._resolve(obj, field, [])
        rendered = []
        for item in optionItems(values):
            markup = singleTag('input', merged(attributes, {
                        'type': inputType,
                        'id': cssID(obj, field, item.value),
                        'name': fieldName(obj, field) + suffix,
                        'value': item.value,
                        'checked': (options.isChecked(item.value, current)
                                    and 'checked' or None)}))
            if options.showLabel:
                markup += self.label(
                    obj, cssID(field, item.value), item.label)
            rendered.append(markup)
        return options.join.join(rendered)


    def checkbox(self, obj, field, values, attributes=None, join=None,
                 label=True, checked=()):
        """
        Checkbox, or a group of them when C{values} is a list.

        Offering more than one value names every checkbox C{obj[field][]} so
        that all checked values are submitted.

        @param values: A C{list} of options or a single option.  An option is
            a value, or a C{(value, label)} tuple.
        @param join: Markup placed between checkboxes, a space by default.
        @param label: C{False} to omit the generated labels.
        @param checked: Values to check whatever was submitted.
        """
        if isinstance(values, list) and len(values) > 1:
            suffix = '[]'
        else:
            suffix = ''
        options = GroupOptions(join=DEFAULT_JOIN if join is None else join,
                               showLabel=label is not False,
                               checked=checked or ())
        return self._group(CHECKBOX_INPUT, suffix, obj, field, values,
                           attributes, options)


    def radio(self, obj, field, values, attributes=None, join=None,
              label=True, checked=()):
        """
        Radio button group.  Takes the same arguments as L{checkbox}, but only
        one value is ever submitted so the name has no C{[]} suffix.
        """
        options = GroupOptions(join=DEFAULT_JOIN if join is None else join,
                               showLabel=label is not False,
                               checked=checked or ())
        return self._group(RADIO_INPUT, '', obj, field, values, attributes,
                           options)


    def select(self, obj, field, values, attributes=None):
        """
        Single-choice drop down.  The option whose value matches the
        submitted one (or the C{value} in C{attributes}) is selected.
        """
        attributes = merged(attributes)
        current = self._resolve(obj, field, attributes.pop('value', None))
        if current is None:
            current = ''
        current = str(current)
        content = ''.join([
                tag('option', escapeHTML(item.label), {
                        'value': item.value,
                        'selected': (str(item.value) == current
                                     and 'selected' or None)})
                for item in optionItems(values)])
        return tag('select', content, merged(attributes, {
                    'id': cssID(obj, field),
                    'name': fieldName(obj, field)}))


    def fieldset(self, obj, legend=None, block=None):
        """
        Group fields of C{obj} in a C{<fieldset>}.

        @param block: A one-argument callable given a L{Fieldset} bound to
            C{obj}, returning the markup to wrap.
        @raise InvalidUsage: If C{block} is not given or does not
            return a string.
        """
        if block is None:
            raise InvalidUsage("Missing block to fieldset()")
        content = _blockContent("fieldset", block(Fieldset(self, obj)))
        if legend is not None:
            content = tag('legend', escapeHTML(legend)) + content
        return tag('fieldset', content)


    def form(self, action, method='get', attributes=None, block=None):
        """
        Wrap the markup returned by C{block} in a C{<form>}.

        The original C{method} is also submitted in a hidden C{_method} input,
        so forms can stand in for methods browsers do not send.

        @raise InvalidUsage: If C{block} is not given or does not
            return a string.
        """
        if block is None:
            raise InvalidUsage("form() requires a block to produce its content")
        method = str(method)
        content = singleTag('input', {
                'type': HIDDEN_INPUT,
                'name': '_method',
                'value': method}) + _blockContent("form", block())
        return tag('form', content, merged({
                    'action': action,
                    'method': method.upper()}, attributes))



@implementer(IBoundFormHelpers)
class Fieldset(object):
    """
    Form helpers with the object name already supplied.  This is what
    L{FormHelpers.fieldset} passes to its block.

    @type parent: L{IFormHelpers}
    @ivar parent: The helpers calls are forwarded to.

    @type name: C{str}
    @ivar name: The object name, stripped of non-word characters.
    """
    def __init__(self, parent, name):
        self.parent = parent
        self.name = fieldsetName(name)


    def label(self, field, display=None, attributes=None):
        return self.parent.label(self.name, field, display, attributes)


    def input(self, field=None, attributes=None):
        return self.parent.input(self.name, field, attributes)


    def password(self, field=None, attributes=None):
        return self.parent.password(self.name, field, attributes)


    def hidden(self, field=None, attributes=None):
        return self.parent.hidden(self.name, field, attributes)


    def textarea(self, field=None, content='', attributes=None):
        return self.parent.textarea(self.name, field, content, attributes)


    def checkbox(self, field, values, attributes=None, join=None, label=True,
                 checked=()):
        return self.parent.checkbox(self.name, field, values, attributes,
                                    join, label, checked)


    def radio(self, field, values, attributes=None, join=None, label=True,
              checked=()):
        return self.parent.radio(self.name, field, values, attributes,
                                 join, label, checked)


    def select(self, field, values, attributes=None):
        return self.parent.select(self.name, field, values, attributes)


    def fieldset(self, legend=None, block=None):
        return self.parent.fieldset(self.name, legend, block)


    # These don't name a field.
    def link(self, content, href=None, attributes=None):
        return self.parent.link(content, href, attributes)


    def submit(self, value='Submit', attributes=None):
        return self.parent.submit(value, attributes)


    def reset(self, value='Reset', attributes=None):
        return self.parent.reset(value, attributes)


    def button(self, value, attributes=None):
        return self.parent.button(value, attributes)


    def form(self, action, method='get', attributes=None, block=None):
        return self.parent.form(action, method, attributes, block)
