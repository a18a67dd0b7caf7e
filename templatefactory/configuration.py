# -*- coding: utf-8 -*-
"""
Configuration of the template factory.

Options are kept in a flat dictionary with dotted keys, each
:class:`.ConfigurationComponent` registered into a :class:`.Configurator`
contributes its defaults and the functions used to convert the options
it cares about (usually coming from an ``.ini`` file as strings).

"""
import os

from .exceptions import TemplateFactoryConfigError

from logging import getLogger
log = getLogger(__name__)


def asbool(obj):
    if isinstance(obj, str):
        obj = obj.strip().lower()
        if obj in ["true", "yes", "on", "y", "t", "1"]:
            return True
        elif obj in ["false", "no", "off", "n", "f", "0"]:
            return False
        else:
            raise ValueError("String is not true/false: %r" % obj)
    return bool(obj)


def asint(obj):
    try:
        return int(obj)
    except (TypeError, ValueError):
        raise ValueError("Bad integer value: %r" % obj)


def aslist(obj, sep=None, strip=True):
    if isinstance(obj, str):
        lst = obj.split(sep)
        if strip:
            lst = [v.strip() for v in lst]
        return lst
    elif isinstance(obj, (list, tuple)):
        return list(obj)
    elif obj is None:
        return []
    else:
        return [obj]


def coerce_options(options, converters):
    """Convert some configuration options to expected types.

    Only the options listed in ``converters`` and present
    in ``options`` are returned::

        conf.update(coerce_options(conf, {
            'templatefactory.jinja.auto_reload': asbool,
            'templatefactory.jinja.cache_size': asint
        }))
    """
    converted_options = {}
    for option, converter in converters.items():
        if option in options:
            converted_options[option] = converter(options[option])
    return converted_options


def coerce_config(configuration, prefix, converters):
    """Extracts a set of options with a common prefix and converts them.

    To extract all options of the jinja engine::

        jinja_options = coerce_config(conf, 'templatefactory.jinja.', {
            'auto_reload': asbool,
            'cache_size': asint
        })
    """
    options = dict((key[len(prefix):], configuration[key])
                   for key in configuration if key.startswith(prefix))
    options.update(coerce_options(options, converters))
    return options


class Configurator(object):
    """Builds the template factory configuration out of registered components.

    Each registered component provides default values for the
    options it owns, the way they should be converted and can
    validate the resulting configuration.
    """
    def __init__(self):
        self._blueprint = {}
        self._coercion = {}
        self._components = []

    def register(self, component_type):
        """Registers a new configuration component"""
        if not issubclass(component_type, ConfigurationComponent):
            raise ValueError('Configuration component must inherit ConfigurationComponent')

        component = component_type()
        if self.get_component(component.id) is not None:
            raise KeyError('Already existing component for id %s' % component.id)

        component._prepare_blueprint(self._blueprint)
        component._prepare_coercion(self._coercion)
        self._components.append(component)

    def get_component(self, component_id):
        """Retrieve a registered configuration component."""
        for component in self._components:
            if component.id == component_id:
                return component
        return None

    def configure(self, global_conf=None, app_conf=None):
        """Prepare a configuration using the configurator.

        ``global_conf`` and ``app_conf`` are applied on top of
        the blueprint in this order, then options are coerced
        and validated by each component.
        """
        conf = {}
        conf.update(self._blueprint)
        conf.update(global_conf or {})
        conf.update(app_conf or {})

        conf.update(coerce_options(conf, self._coercion))

        for component in self._components:
            log.debug('%s validating configuration', component.__class__.__name__)
            component.validate(conf)

        log.debug("Template factory configured, engine: '%s'",
                  conf.get('templatefactory.engine'))
        return conf


class ConfigurationComponent(object):
    """A piece of the configuration process.

    Subclasses must provide an ``id`` class attribute and can
    override :meth:`get_defaults`, :meth:`get_coercion` and :meth:`validate`.
    """
    def __init__(self):
        if not hasattr(self, 'id'):
            raise ValueError('ConfigurationComponent must provide an id class attribute '
                             'to uniquely identify the component.')

    def get_defaults(self):
        """Default values for the options owned by the component::

            {'option_name': 'value'}
        """
        return {}

    def get_coercion(self):
        """Conversion functions for the options owned by the component::

            {'option_name': coerce_function}
        """
        return {}

    def validate(self, conf):
        """Checks the configuration once options have been coerced."""
        return

    def _prepare_blueprint(self, blueprint):
        for k, v in self.get_defaults().items():
            blueprint.setdefault(k, v)

    def _prepare_coercion(self, coercion):
        for k, v in self.get_coercion().items():
            coercion.setdefault(k, v)


class TemplateFactoryConfigurationComponent(ConfigurationComponent):
    """Options driving the engine selection.

    The available options are:

        - ``templatefactory.engine`` -> (``str``) Identifier of the active template
          engine, one of :meth:`.EngineRegistry.list_available`. An empty value
          disables the factory entirely.
        - ``templatefactory.api_var`` -> (``str``) Name under which the engine
          of the current request is exposed on the request context.
        - ``templatefactory.admin_template`` -> (``str``) Template whose pages
          are never rendered through the engine.
        - ``paths.templates`` -> (``str``) Root directory of the site templates,
          engines look for their own templates directory inside it.
    """
    id = 'templatefactory'

    def get_defaults(self):
        return {
            'templatefactory.engine': 'none',
            'templatefactory.api_var': 'view',
            'templatefactory.admin_template': 'admin',
            'paths.templates': os.getcwd(),
        }

    def get_coercion(self):
        return {
            'templatefactory.engine': lambda v: (v or '').strip().lower(),
            'templatefactory.api_var': lambda v: (v or '').strip(),
        }

    def validate(self, conf):
        from .registry import EngineRegistry

        if not conf['templatefactory.api_var']:
            raise TemplateFactoryConfigError('templatefactory.api_var option must not be empty')

        engine = conf['templatefactory.engine']
        if engine and engine not in EngineRegistry.engines:
            log.warning('Template engine %s is not a known engine, '
                        'requests will fail to resolve it', engine)


class EnginesConfigurationComponent(ConfigurationComponent):
    """Options of each template engine.

    Options live under ``templatefactory.<engine id>.``, refer to the
    ``options`` attribute of each engine for the supported ones.
    """
    id = 'engines'

    def get_defaults(self):
        from .registry import EngineRegistry

        defaults = {}
        for identifier, engine in EngineRegistry.engines.items():
            for option, value in engine.options.items():
                defaults['templatefactory.%s.%s' % (identifier, option)] = value
        return defaults

    def get_coercion(self):
        from .registry import EngineRegistry

        coercion = {}
        for identifier, engine in EngineRegistry.engines.items():
            for option, converter in engine.option_converters.items():
                coercion['templatefactory.%s.%s' % (identifier, option)] = converter
        return coercion


def create_configurator():
    """Creates a :class:`.Configurator` with the template factory components."""
    configurator = Configurator()
    configurator.register(TemplateFactoryConfigurationComponent)
    configurator.register(EnginesConfigurationComponent)
    return configurator


def configure(global_conf=None, app_conf=None):
    """Shortcut building a configuration with the default components.

    Arguments follow :meth:`.Configurator.configure`, ``app_conf`` wins::

        conf = configure(app_conf={'templatefactory.engine': 'jinja'})
    """
    return create_configurator().configure(global_conf, app_conf)
