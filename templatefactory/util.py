"""Utilities shared by the template factory modules."""


class NoDefault(object):
    pass


def get_partial_dict(prefix, dictionary, container_type=dict):
    """Given a dictionary and a prefix, return a Bunch, with just items
    that start with prefix

    The returned dictionary will have 'prefix.' stripped so::

        get_partial_dict('prefix', {'prefix.xyz':1, 'prefix.zyx':2, 'xy':3})

    would return::

        {'xyz':1,'zyx':2}
    """
    match = prefix + "."
    n = len(match)

    new_dict = container_type(
        ((key[n:], dictionary[key]) for key in dictionary if key.startswith(match))
    )

    if new_dict:
        return new_dict
    raise AttributeError(prefix)


class Bunch(dict):
    """A dictionary that provides attribute-style access.

    Used for pages handed over by the host and for template variables,
    so that templates can use both ``page.title`` and ``page['title']``.
    """

    def __getitem__(self, key):
        return dict.__getitem__(self, key)

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            return get_partial_dict(name, self, Bunch)

    __setattr__ = dict.__setitem__
