import logging

from markupsafe import Markup
from repoze.lru import LRUCache

from ..configuration import asbool, asint, aslist
from ..exceptions import EngineInitializationError
from .base import TemplateEngine, CacheInvalidatable

try:
    import jinja2
except ImportError:  # pragma: no cover
    jinja2 = None

if jinja2 is not None:
    from jinja2 import Environment, FileSystemLoader

__all__ = ['JinjaEngine']

log = logging.getLogger(__name__)


class JinjaEngine(TemplateEngine, CacheInvalidatable):
    """Renders templates with Jinja2.

    When ``caching`` is enabled rendered output is kept in a LRU cache
    shared by all the engines using the same templates directory,
    entries are keyed by template and variables. The cache is cleared
    by :meth:`clear_all_cache`, a different ``cache_size`` replaces it.

    The caches live in :attr:`_output_caches` on the class, the only
    state this package keeps across requests. It is owned by the engine
    and only ever mutated through :meth:`init_engine` and
    :meth:`clear_all_cache`.

    """
    identifier = 'jinja'
    options = {'templates_path': 'views',
               'template_extension': '.jinja',
               'auto_reload': True,
               'autoescape': True,
               'extensions': [],
               'caching': False,
               'cache_size': 256}
    option_converters = {'auto_reload': asbool,
                         'autoescape': asbool,
                         'extensions': aslist,
                         'caching': asbool,
                         'cache_size': asint}

    #: Output caches by templates directory, they outlive single requests.
    _output_caches = {}

    @classmethod
    def is_available(cls):
        return jinja2 is not None

    def init_engine(self):
        if jinja2 is None:  # pragma: no cover
            raise EngineInitializationError('Jinja2 is not available')

        templates_path = self.get_templates_path()
        try:
            self.jinja2_env = Environment(loader=FileSystemLoader(templates_path),
                                          autoescape=self.engine_options['autoescape'],
                                          auto_reload=self.engine_options['auto_reload'],
                                          extensions=self.engine_options['extensions'])
        except (ImportError, AttributeError) as e:
            raise EngineInitializationError('Unable to load Jinja2 extensions %s: %s' % (
                self.engine_options['extensions'], e))

        cache_size = self.engine_options['cache_size']
        self.output_cache = self._output_caches.get(templates_path)
        if self.output_cache is None or self.output_cache.size != cache_size:
            self.output_cache = self._output_caches[templates_path] = LRUCache(cache_size)
        log.debug('Jinja2 environment ready for %s', templates_path)

    def _cache_key(self):
        return (self.get_filename(),
                tuple(sorted((name, repr(value)) for name, value in self.data.items())))

    def render(self):
        # Create a render callable for the cache lookup
        def render_template():
            template = self.jinja2_env.get_template(self.get_filename())
            return Markup(template.render(**self.data))

        if not self.engine_options['caching']:
            return render_template()

        cache_key = self._cache_key()
        output = self.output_cache.get(cache_key)
        if output is None:
            output = render_template()
            self.output_cache.put(cache_key, output)
        return output

    def clear_all_cache(self):
        log.debug('Clearing Jinja2 output cache for %s', self.get_templates_path())
        self.output_cache.clear()
