import os
from abc import ABCMeta, abstractmethod

from ..configuration import coerce_config
from ..util import Bunch


class TemplateEngine(object):
    """
    Base class of the template engines driven by the factory.

    An engine is created for a single template, identified by its
    ``filename`` without extension, and lives for a single request.
    Subclasses are registered in :class:`.EngineRegistry` and
    must implement :meth:`init_engine` and :meth:`render`.

    """

    #: Identifier of the engine inside the registry.
    identifier = None

    #: Default options of the engine, they can be overridden
    #: from configuration as ``templatefactory.<identifier>.<option>``.
    options = {'templates_path': 'views',
               'template_extension': '.html'}

    #: Conversion functions for options coming from configuration files.
    option_converters = {}

    def __init__(self, filename, config=None):
        self.filename = filename
        self.config = config or {}
        self.data = Bunch()

        self.engine_options = dict(self.options)
        if self.identifier is not None:
            self.engine_options.update(coerce_config(self.config,
                                                     'templatefactory.%s.' % self.identifier,
                                                     self.option_converters))

    def __repr__(self):
        return '<%s: %r>' % (self.__class__.__name__, self.filename)

    @classmethod
    def is_available(cls):
        """Whenever the library backing the engine can be used."""
        return True

    def get_templates_path(self):
        """Directory where the engine looks for its templates.

        Relative ``templates_path`` options are resolved against
        the ``paths.templates`` site directory.
        """
        return os.path.join(self.config.get('paths.templates', ''),
                            self.engine_options['templates_path'])

    def get_filename(self):
        """Name of the template file, extension included."""
        extension = self.engine_options['template_extension']
        if self.filename.endswith(extension):
            return self.filename
        return self.filename + extension

    def get_template_file(self):
        return os.path.join(self.get_templates_path(), self.get_filename())

    def set(self, name, value):
        """Make ``value`` available to the template as ``name``."""
        self.data[name] = value

    def get(self, name, default=None):
        return self.data.get(name, default)

    def init_engine(self):  # pragma: no cover
        """Engine specific setup, called once the template file is known to exist.

        Failures should be reported raising :class:`.EngineInitializationError`.
        """
        raise NotImplementedError()

    def render(self):  # pragma: no cover
        """Render the template with the variables set on the engine."""
        raise NotImplementedError()


class CacheInvalidatable(metaclass=ABCMeta):
    """Capability of engines keeping a cache of rendered output.

    Engines inheriting from this class get their cache cleared
    whenever a page is saved or deleted on the host.
    """

    @abstractmethod
    def clear_all_cache(self):  # pragma: no cover
        """Discard every cached output of the engine."""
        raise NotImplementedError


def supports_invalidation(engine):
    """Whenever the ``engine`` declares the :class:`.CacheInvalidatable` capability."""
    return isinstance(engine, CacheInvalidatable)
