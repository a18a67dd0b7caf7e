# -*- coding: utf-8 -*-
"""
Known template engines.

The set of engines is closed: an identifier maps to an engine class
through :attr:`EngineRegistry.engines`, supporting a new engine
means adding an entry to that table.

"""
from collections import OrderedDict

from .engines import PassthroughEngine, JinjaEngine, MakoEngine
from .exceptions import NotInstalled

from logging import getLogger
log = getLogger(__name__)


class EngineRegistry(object):
    """Maps engine identifiers to engine classes and display names."""

    #: Prefix of the name every engine is known with on the host.
    CLASS_NAME_PREFIX = 'TemplateEngine'

    engines = OrderedDict([
        ('none', PassthroughEngine),
        ('jinja', JinjaEngine),
        ('mako', MakoEngine),
    ])

    display_names = {
        'none': 'None (passthrough)',
        'jinja': 'Jinja2',
        'mako': 'Mako',
    }

    @classmethod
    def list_available(cls):
        """All the supported engines as ``(identifier, display name)`` pairs."""
        return [(identifier, cls.display_names[identifier]) for identifier in cls.engines]

    @classmethod
    def class_name_for(cls, identifier):
        """Name the host knows the engine with, ``jinja`` is ``TemplateEngineJinja``."""
        return cls.CLASS_NAME_PREFIX + identifier.capitalize()

    @classmethod
    def factory_for(cls, identifier):
        try:
            return cls.engines[identifier]
        except KeyError:
            raise NotInstalled(identifier)

    @classmethod
    def list_installed(cls, oracle):
        """Subset of :meth:`list_available` that the host reports as installed.

        ``oracle`` is a callable receiving an engine class name and
        returning whenever it is installed, when ``None`` no engine
        is considered installed.
        """
        if oracle is None:
            log.debug('No module oracle available, no template engine installed')
            return []

        return [(identifier, name) for identifier, name in cls.list_available()
                if oracle(cls.class_name_for(identifier))]

    @classmethod
    def default_oracle(cls, class_name):
        """Reports engines of the table as installed when the library backing them imports."""
        for identifier, engine in cls.engines.items():
            if cls.class_name_for(identifier) == class_name:
                return engine.is_available()
        return False

