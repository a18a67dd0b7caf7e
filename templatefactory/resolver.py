# -*- coding: utf-8 -*-
import os

from .exceptions import NotInstalled
from .registry import EngineRegistry
from .util import NoDefault

from logging import getLogger
log = getLogger(__name__)


class EngineResolver(object):
    """Creates template engines bound to a template file.

    ``oracle`` tells which engines are installed, by default
    :meth:`.EngineRegistry.default_oracle` of ``registry`` is used.

    The existence of the template file is what makes a template
    rendered through the engine: when it's missing no engine
    is created and the host default rendering is kept.
    """
    def __init__(self, config=None, oracle=NoDefault, registry=EngineRegistry):
        if oracle is NoDefault:
            oracle = registry.default_oracle

        self.config = config or {}
        self.oracle = oracle
        self.registry = registry

    def installed_identifiers(self):
        return [identifier for identifier, __ in self.registry.list_installed(self.oracle)]

    def resolve(self, identifier, filename):
        """Returns an initialized engine for ``filename`` or ``None``.

        Raises :class:`.NotInstalled` when ``identifier`` is not an
        installed engine. Errors raised while initializing the engine
        are propagated as they are.
        """
        if identifier not in self.installed_identifiers():
            raise NotInstalled(identifier)

        engine_type = self.registry.factory_for(identifier)
        engine = engine_type(filename, self.config)

        template_file = os.path.join(engine.get_templates_path(), engine.get_filename())
        if not os.path.exists(template_file):
            log.debug('No template file %s, leaving %s to default rendering',
                      template_file, filename)
            return None

        log.debug('Initializing %r for %s', engine, template_file)
        engine.init_engine()
        return engine
