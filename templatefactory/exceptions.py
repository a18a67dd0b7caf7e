"""Exceptions raised by TemplateEngineFactory.

None of them is recovered by the factory itself, they are meant
to reach the error handling of the hosting application.
"""


class TemplateFactoryError(Exception):
    """Base class for all the errors raised by the template factory."""


class TemplateFactoryConfigError(TemplateFactoryError):
    """The factory configuration is invalid."""


class NotInstalled(TemplateFactoryError):
    """The requested template engine is not installed.

    This is a configuration error: the configured engine identifier
    does not belong to the engines currently available on the host.
    """
    def __init__(self, identifier):
        TemplateFactoryError.__init__(self,
            ("The template engine '%(identifier)s' is not installed. "
             "Install the library it depends on or change the "
             "\"templatefactory.engine\" option.") % dict(identifier=identifier))
        self.identifier = identifier


class EngineInitializationError(TemplateFactoryError):
    """A template engine failed to set itself up.

    Raised by :meth:`.TemplateEngine.init_engine` implementations and
    propagated as is by the resolver.
    """
