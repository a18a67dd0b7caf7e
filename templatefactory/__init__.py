"""
TemplateEngineFactory renders content pages through a configurable template engine.

To enable it create a factory and let it know when a request is ready::

    from templatefactory import TemplateEngineFactory, RequestContext, configure

    factory = TemplateEngineFactory(configure(app_conf={'templatefactory.engine': 'jinja'}))
    context = RequestContext(page)
    factory.ready(context)
    output = context.hooks.notify_with_value(AFTER_RENDER, output, args=(page, ))

"""
from .release import version
from .configuration import configure, create_configurator
from .engines import (TemplateEngine, CacheInvalidatable, supports_invalidation,
                      PassthroughEngine, JinjaEngine, MakoEngine)
from .exceptions import (TemplateFactoryError, TemplateFactoryConfigError,
                         NotInstalled, EngineInitializationError)
from .factory import TemplateEngineFactory
from .hooks import HooksNamespace, AFTER_RENDER, AFTER_SAVE, AFTER_DELETE
from .registry import EngineRegistry
from .request_local import RequestContext
from .resolver import EngineResolver
from .util import Bunch
from .wsgiapp import TemplateFactoryApp

__version__ = version

__all__ = ['configure', 'create_configurator',
           'TemplateEngine', 'CacheInvalidatable', 'supports_invalidation',
           'PassthroughEngine', 'JinjaEngine', 'MakoEngine',
           'TemplateFactoryError', 'TemplateFactoryConfigError',
           'NotInstalled', 'EngineInitializationError',
           'TemplateEngineFactory', 'HooksNamespace',
           'AFTER_RENDER', 'AFTER_SAVE', 'AFTER_DELETE',
           'EngineRegistry', 'RequestContext',
           'EngineResolver', 'Bunch', 'TemplateFactoryApp']
