# -*- test-case-name: formhelpers.test.test_markup -*-

"""
String-level primitives for building HTML form markup.

Everything in this module is a pure function of its arguments.  The helpers
in L{formhelpers.helpers} are assembled from these.
"""

import re

from twisted.python import log

from epsilon.structlike import record


_nonWord = re.compile(r'\W+')
_underscores = re.compile(r'_+')
_wordStart = re.compile(r"\b('?[a-z])")



def escapeHTML(text):
    """
    Escape C{text} for inclusion in HTML content or a double-quoted
    attribute value.

    @param text: Any object.  Its string form is escaped; C{None} is treated
        as the empty string.

    @rtype: C{str}
    """
    if text is None:
        return ''
    return (str(text)
            .replace('&', '&amp;')
            .replace('"', '&quot;')
            .replace('>', '&gt;')
            .replace('<', '&lt;'))



def cssID(*components):
    """
    Derive an C{id} attribute value from C{components}.

    C{None} components are skipped, the rest are joined with underscores,
    lowercased, and every run of non-word characters becomes a single
    underscore.  C{cssID('Person', 'First Name')} is C{'person_first_name'}.
    """
    joined = '_'.join([str(c) for c in components if c is not None])
    return _nonWord.sub('_', joined.lower())



def fieldName(obj, field):
    """
    Return the C{name} attribute value for C{field} of C{obj}: C{obj} itself
    when there is no field, C{'obj[field]'} otherwise.
    """
    if field is None:
        return str(obj)
    return '%s[%s]' % (obj, field)



def fieldsetName(name):
    """
    Sanitize an object name bound by a fieldset by dropping all non-word
    characters.
    """
    return _nonWord.sub('', str(name))



def titleize(text):
    """
    Turn an identifier like C{'first_name'} into display text like
    C{'First Name'}.
    """
    spaced = _underscores.sub(' ', str(text))
    return _wordStart.sub(lambda match: match.group(1).capitalize(), spaced)



def resolveValue(parameters, obj, field, default):
    """
    Find the value with which a field should be populated.

    Submitted parameters are keyed first by object name and then, when a
    field is given, by field name.  A value present in C{parameters} wins,
    even if it is the empty string; anything missing (or C{None}) yields
    C{default}.  Other false values such as C{False} or C{0} are values too,
    and are returned as they are.

    @type parameters: C{dict}
    @param parameters: Submitted request parameters.  Values are strings,
        lists of strings, or nested mappings of the same.
    """
    entry = parameters.get(str(obj))
    if field is None:
        if entry is None:
            return default
        return entry
    if entry is None:
        return default
    if not hasattr(entry, 'get'):
        log.msg("Parameter %r is %r, not a mapping; using default for %r" % (
                str(obj), entry, str(field)))
        return default
    value = entry.get(str(field))
    if value is None:
        return default
    return value



def attributesToString(attributes):
    """
    Serialize C{attributes} as they appear inside an HTML tag.

    Names are emitted in sorted order and values are escaped.  An attribute
    whose value is C{None} is left out altogether.

    @type attributes: C{dict} or C{None}
    @rtype: C{str}
    """
    if not attributes:
        return ''
    return ' '.join([
            '%s="%s"' % (name, escapeHTML(attributes[name]))
            for name in sorted(attributes)
            if attributes[name] is not None])



def _openTag(name, attributes):
    serialized = attributesToString(attributes)
    if serialized:
        return '%s %s' % (name, serialized)
    return name



def tag(name, content, attributes=None):
    """
    Create an element with an open and close tag around C{content}.

    C{content} is inserted as given; escape free text before passing it in.
    If C{content} is C{None} only the open tag is produced.

    >>> tag('h1', 'My awesome title', {'class': 'page-title'})
    '<h1 class="page-title">My awesome title</h1>'
    """
    opened = _openTag(name, attributes)
    if content is None:
        return '<%s>' % (opened,)
    return '<%s>%s</%s>' % (opened, content, name)



def singleTag(name, attributes=None):
    """
    Create a self-closing element such as C{<input ... />}.
    """
    return '<%s />' % (_openTag(name, attributes),)



def merged(*mappings):
    """
    Combine attribute mappings into a new C{dict}, later ones winning.  The
    arguments are never modified; C{None} arguments are ignored.
    """
    result = {}
    for mapping in mappings:
        if mapping:
            result.update(mapping)
    return result



class Scalar(record('value')):
    """
    An option whose submitted value and displayed label are the same.
    """
    @property
    def label(self):
        return self.value



class Pair(record('value label')):
    """
    An option with a submitted value distinct from its displayed label.
    """



def optionItem(item):
    """
    Classify a single option given by a caller.

    Two-tuples and L{Pair}s are pairs of C{(value, label)}; L{Scalar}s are
    passed through; anything else is wrapped in a L{Scalar}.

    @rtype: L{Scalar} or L{Pair}
    """
    if isinstance(item, (Scalar, Pair)):
        return item
    if isinstance(item, tuple) and len(item) == 2:
        return Pair(*item)
    return Scalar(item)



def optionItems(values):
    """
    Return a list of L{Scalar} and L{Pair} items for C{values}, which is either
    a C{list} of options or one option on its own.
    """
    if isinstance(values, list):
        return [optionItem(v) for v in values]
    return [optionItem(values)]
