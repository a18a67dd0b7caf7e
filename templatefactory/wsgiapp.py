"""WSGI host serving pages through the template factory."""
from markupsafe import escape
from webob import Request, Response
from webob.exc import HTTPNotFound

from .factory import TemplateEngineFactory
from .hooks import AFTER_RENDER, AFTER_SAVE, AFTER_DELETE
from .registry import EngineRegistry
from .request_local import RequestContext
from .util import NoDefault

from logging import getLogger
log = getLogger(__name__)

__all__ = ['TemplateFactoryApp']


def default_page_renderer(page):
    """Host default rendering, the page ``body`` escaped."""
    return escape(page.get('body', ''))


class TemplateFactoryApp(object):
    """Minimal content host rendering ``pages`` through a :class:`.TemplateEngineFactory`.

    ``pages`` maps request paths to pages, each page is a mapping
    providing at least its ``template`` name, plain
    dictionaries are fine. ``default_renderer`` is
    called with the page to produce the output the template engine
    will replace.

    """
    def __init__(self, pages, default_renderer=default_page_renderer,
                 config=None, oracle=NoDefault, registry=EngineRegistry):
        self.pages = pages
        self.default_renderer = default_renderer
        self.factory = TemplateEngineFactory(config, oracle, registry)

    def render_page(self, context):
        """Renders the page of ``context`` and passes the output through the hooks."""
        self.factory.ready(context)
        output = self.default_renderer(context.page)
        return context.hooks.notify_with_value(AFTER_RENDER, output, args=(context.page, ))

    def save(self, context, page):
        """Notifies that ``page`` has been saved while handling ``context``."""
        self.factory.ready(context)
        context.hooks.notify(AFTER_SAVE, args=(page, ))

    def delete(self, context, page):
        """Notifies that ``page`` has been deleted while handling ``context``."""
        self.factory.ready(context)
        context.hooks.notify(AFTER_DELETE, args=(page, ))

    def __call__(self, environ, start_response):
        req = Request(environ)

        page = self.pages.get(req.path_info)
        if page is None:
            log.debug('No page for %s', req.path_info)
            return HTTPNotFound()(environ, start_response)

        context = RequestContext(page, request=req)
        output = self.render_page(context)

        resp = Response(content_type='text/html', charset='utf-8')
        resp.text = str(output)
        return resp(environ, start_response)
