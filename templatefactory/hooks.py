# -*- coding: utf-8 -*-
"""
Hooks fired by the host while handling a request.

Each request owns its own :class:`HooksNamespace`, so functions
registered while handling a request are never seen by other ones.

"""
from logging import getLogger
log = getLogger(__name__)


#: Fired after the host rendered a page, registered functions receive
#: the rendered output and the page and return the output to use.
AFTER_RENDER = 'after_render'

#: Fired after a page has been saved, registered functions receive the page.
AFTER_SAVE = 'after_save'

#: Fired after a page has been deleted, registered functions receive the page.
AFTER_DELETE = 'after_delete'

HOOKS = (AFTER_RENDER, AFTER_SAVE, AFTER_DELETE)


class HooksNamespace(object):
    """Manages hooks registrations and notifications"""
    def __init__(self):
        self._hooks = dict()

    def _call_handler(self, hook_name, trap_exceptions, func, args, kwargs):
        try:
            return func(*args, **kwargs)
        except Exception:
            if trap_exceptions is True:
                log.exception('Trapped Exception while handling %s -> %s', hook_name, func)
            else:
                raise

    def register(self, hook_name, func):
        """Registers ``func`` to be called when ``hook_name`` is notified::

            context.hooks.register(AFTER_SAVE, clear_cache)

        Only the hooks listed in :data:`HOOKS` are supported.
        """
        if hook_name not in HOOKS:
            raise ValueError('Unsupported hook %s, available hooks are %s' % (hook_name, HOOKS))

        log.debug("Registering %s for hook %s", func, hook_name)
        self._hooks.setdefault(hook_name, []).append(func)

    def registered(self, hook_name):
        """Functions currently registered for ``hook_name``."""
        return tuple(self._hooks.get(hook_name, ()))

    def notify(self, hook_name, args=None, kwargs=None, trap_exceptions=False):
        """Notifies an hook.

        Each function registered for the given hook will be executed,
        ``args`` and ``kwargs`` will be passed to the registered functions
        as arguments::

            context.hooks.notify(AFTER_DELETE, args=(page, ))

        """
        args = args or []
        kwargs = kwargs or {}

        for func in self._hooks.get(hook_name, ()):
            self._call_handler(hook_name, trap_exceptions, func, args, kwargs)

    def notify_with_value(self, hook_name, value, args=None):
        """Notifies an hook which is expected to return a value.

        Each registered function receives as input the value returned
        by the previous function in chain, followed by ``args``, and
        returns a replacement for it.

        The resulting value will be returned by the ``notify_with_value``
        call itself::

            output = context.hooks.notify_with_value(AFTER_RENDER, output, args=(page, ))

        """
        args = args or []

        for func in self._hooks.get(hook_name, ()):
            value = func(value, *args)

        return value
