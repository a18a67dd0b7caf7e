# -*- coding: utf-8 -*-
"""
Binds the configured template engine to the requests handled by the host.

When a request is ready :meth:`TemplateEngineFactory.ready` resolves the
engine for the template of the current page. If the template has a
template file the engine is exposed on the request context and hooks
are attached so that the engine output replaces the default page output
and engine caches are cleared when pages change.

"""
from functools import partial

from .configuration import configure
from .engines import supports_invalidation
from .exceptions import TemplateFactoryConfigError
from .hooks import AFTER_RENDER, AFTER_SAVE, AFTER_DELETE
from .registry import EngineRegistry
from .request_local import IDLE, BOUND, INACTIVE, page_template
from .resolver import EngineResolver
from .util import NoDefault

from logging import getLogger
log = getLogger(__name__)


class TemplateEngineFactory(object):
    """Process wide coordinator of the template engines.

    The factory itself keeps no per request state, everything
    related to a request is stored on its :class:`.RequestContext`.

    """
    def __init__(self, config=None, oracle=NoDefault, registry=EngineRegistry):
        if config is None:
            config = configure()

        self.config = config
        self.engine = config.get('templatefactory.engine') or ''
        self.api_var = config.get('templatefactory.api_var', 'view')
        self.admin_template = config.get('templatefactory.admin_template', 'admin')
        if not self.api_var:
            raise TemplateFactoryConfigError('templatefactory.api_var option must not be empty')

        self.resolver = EngineResolver(config, oracle, registry)

    def __repr__(self):
        return '<TemplateEngineFactory: %s as %s>' % (self.engine or None, self.api_var)

    def ready(self, context):
        """Resolves the engine for the request and attaches the rendering hooks.

        Performed only once per request, further calls return the state
        reached by the first one. :class:`.NotInstalled` is propagated
        when the configured engine is not installed.
        """
        if context.engine_state != IDLE:
            log.debug('%r already processed', context)
            return context.engine_state

        if not self.engine:
            log.debug('No template engine configured')
            context.engine_state = INACTIVE
            return INACTIVE

        template_name = context.template_name
        if not template_name:
            log.debug('Page %r has no template', context.page)
            context.engine_state = INACTIVE
            return INACTIVE

        engine = self.resolver.resolve(self.engine, template_name)
        if engine is None:
            context.engine_state = INACTIVE
            return INACTIVE

        engine.set('page', context.page)
        context.wire(self.api_var, engine)
        context.hooks.register(AFTER_RENDER, partial(self.hook_render, context))

        if supports_invalidation(engine):
            hook_clear_cache = partial(self.hook_clear_cache, context)
            context.hooks.register(AFTER_SAVE, hook_clear_cache)
            context.hooks.register(AFTER_DELETE, hook_clear_cache)

        log.debug('%r bound to %s', engine, self.api_var)
        context.engine_state = BOUND
        return BOUND

    def get_instance(self, context):
        """The engine exposed for the request, ``None`` when there isn't one."""
        return context.wire(self.api_var)

    def load(self, filename):
        """Creates a new engine for ``filename``, useful to render partial templates.

        Returns ``None`` when the template file doesn't exist
        or no engine is configured.
        """
        if not self.engine:
            return None
        return self.resolver.resolve(self.engine, filename)

    def hook_render(self, context, output, page):
        """Replaces the page ``output`` with the one of the request engine."""
        if page_template(page) == self.admin_template:
            return output

        return self.get_instance(context).render()

    def hook_clear_cache(self, context, page):
        """Clears the whole cache of the request engine when ``page`` changes."""
        log.debug('%r changed, clearing template engine cache', page)
        self.get_instance(context).clear_all_cache()
