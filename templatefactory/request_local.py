from collections.abc import Mapping

from .hooks import HooksNamespace
from .util import NoDefault


#: Request not yet processed by the factory.
IDLE = 'idle'
#: An engine has been exposed for the request and hooks attached.
BOUND = 'bound'
#: The host default rendering is used for the request.
INACTIVE = 'inactive'


def page_template(page):
    """Template name of ``page``, pages can be mappings or plain objects."""
    if isinstance(page, Mapping):
        return page.get('template')
    return getattr(page, 'template', None)


class RequestContext(object):
    """State of a single request handled by the host.

    Carries the page being rendered, the hooks registered while
    handling the request and the values exposed to templates
    and host code through :meth:`wire`. A context is never
    shared between requests.

    """
    def __init__(self, page, request=None):
        self.page = page
        self.request = request
        self.hooks = HooksNamespace()
        self.engine_state = IDLE
        self._wired = {}

    def __repr__(self):
        return '<RequestContext: %r %s>' % (self.page, self.engine_state)

    @property
    def template_name(self):
        """Name of the template of the page being rendered."""
        return page_template(self.page)

    def wire(self, name, value=NoDefault):
        """Get or set a value exposed under ``name`` for the current request.

        ``context.wire('view', engine)`` exposes the engine, while
        ``context.wire('view')`` returns it back or ``None``.
        """
        if value is NoDefault:
            return self._wired.get(name)
        self._wired[name] = value
        return value
