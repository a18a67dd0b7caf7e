import os
import logging

from markupsafe import Markup

from ..configuration import asbool
from ..exceptions import EngineInitializationError
from .base import TemplateEngine

try:
    import mako
except ImportError:  # pragma: no cover
    mako = None

if mako is not None:
    from mako.lookup import TemplateLookup

__all__ = ['MakoEngine']

log = logging.getLogger(__name__)


class MakoEngine(TemplateEngine):
    """Renders templates with Mako.

    Compiled templates are stored in ``compiled_templates_dir`` when
    provided, otherwise they are kept in memory. Mako doesn't cache
    rendered output, so the engine has no cache to invalidate.

    """
    identifier = 'mako'
    options = {'templates_path': 'views',
               'template_extension': '.mak',
               'auto_reload': True,
               'compiled_templates_dir': None}
    option_converters = {'auto_reload': asbool}

    @classmethod
    def is_available(cls):
        return mako is not None

    def _get_compiled_dir(self):
        compiled_dir = self.engine_options['compiled_templates_dir']
        if not compiled_dir or compiled_dir.lower() in ('none', 'false'):
            # Cache compiled templates in-memory
            return None

        try:
            os.makedirs(compiled_dir, exist_ok=True)
        except OSError:
            log.warning("Unable to write compiled templates to %r; falling back "
                        "to an in-memory cache. Please set the "
                        "`templatefactory.mako.compiled_templates_dir` configuration "
                        "option to a writable directory.", compiled_dir)
            return None

        if not os.access(compiled_dir, os.W_OK):
            log.warning("Compiled templates directory %r is not writable; falling back "
                        "to an in-memory cache.", compiled_dir)
            return None

        return compiled_dir

    def init_engine(self):
        if mako is None:  # pragma: no cover
            raise EngineInitializationError('Mako is not available')

        self.loader = TemplateLookup(directories=[self.get_templates_path()],
                                     module_directory=self._get_compiled_dir(),
                                     input_encoding='utf-8',
                                     imports=['from markupsafe import escape_silent as escape'],
                                     default_filters=['escape'],
                                     filesystem_checks=self.engine_options['auto_reload'])

    def render(self):
        template = self.loader.get_template(self.get_filename())
        return Markup(template.render_unicode(**self.data))
