import io

from markupsafe import Markup

from .base import TemplateEngine

__all__ = ['PassthroughEngine']


class PassthroughEngine(TemplateEngine):
    """Serves the template file content as is.

    Used when no real template engine is configured, pages
    that provide a template file are replaced by its content.
    """
    identifier = 'none'
    options = {'templates_path': 'views',
               'template_extension': '.html',
               'encoding': 'utf-8'}

    def init_engine(self):
        self.template_file = self.get_template_file()

    def render(self):
        with io.open(self.template_file, encoding=self.engine_options['encoding']) as f:
            return Markup(f.read())
