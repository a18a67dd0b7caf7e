# -*- coding: utf-8 -*-
import os

import pytest
from markupsafe import Markup

from templatefactory.engines import (TemplateEngine, CacheInvalidatable, supports_invalidation,
                                     PassthroughEngine, JinjaEngine, MakoEngine)
from templatefactory.exceptions import EngineInitializationError
from templatefactory.util import Bunch

from .base import CountingEngine, CachingCountingEngine, write_templates


@pytest.fixture(autouse=True)
def clear_output_caches():
    JinjaEngine._output_caches.clear()
    yield
    JinjaEngine._output_caches.clear()


class TestCapabilityCheck(object):
    def test_caching_engines(self):
        assert supports_invalidation(JinjaEngine('home')) is True
        assert supports_invalidation(CachingCountingEngine('home')) is True

    def test_engines_without_cache(self):
        assert supports_invalidation(MakoEngine('home')) is False
        assert supports_invalidation(PassthroughEngine('home')) is False
        assert supports_invalidation(CountingEngine('home')) is False

    def test_clear_method_is_not_enough(self):
        class LooksCaching(CountingEngine):
            def clear_all_cache(self):
                pass

        assert supports_invalidation(LooksCaching('home')) is False

    def test_capability_requires_implementation(self):
        class MissingClear(CountingEngine, CacheInvalidatable):
            pass

        with pytest.raises(TypeError):
            MissingClear('home')


class TestTemplateEngine(object):
    def test_paths(self, tmp_path):
        engine = JinjaEngine('contact', {'paths.templates': str(tmp_path)})
        assert engine.get_templates_path() == os.path.join(str(tmp_path), 'views')
        assert engine.get_filename() == 'contact.jinja'
        assert engine.get_template_file() == os.path.join(str(tmp_path), 'views', 'contact.jinja')

    def test_absolute_templates_path(self, tmp_path):
        other = str(tmp_path / 'elsewhere')
        engine = MakoEngine('contact', {'paths.templates': str(tmp_path),
                                        'templatefactory.mako.templates_path': other})
        assert engine.get_templates_path() == other

    def test_options_from_config(self):
        engine = JinjaEngine('contact', {'templatefactory.jinja.template_extension': '.html',
                                         'templatefactory.jinja.caching': 'yes',
                                         'templatefactory.mako.template_extension': '.txt'})
        assert engine.get_filename() == 'contact.html'
        assert engine.engine_options['caching'] is True
        assert JinjaEngine.options['template_extension'] == '.jinja'

    def test_variables(self):
        engine = PassthroughEngine('contact')
        engine.set('title', 'Contact')
        assert engine.get('title') == 'Contact'
        assert engine.get('missing') is None
        assert engine.get('missing', 'default') == 'default'

    def test_repr(self):
        assert repr(MakoEngine('contact')) == "<MakoEngine: 'contact'>"

    def test_base_engine_without_identifier(self):
        engine = TemplateEngine('contact', {'templatefactory.None.templates_path': 'x'})
        assert engine.get_filename() == 'contact.html'
        assert engine.engine_options['templates_path'] == 'views'


class TestPassthroughEngine(object):
    def test_render_file_as_is(self, tmp_path):
        write_templates(tmp_path, {'contact.html': '<h1>{{ title }}</h1>'})
        engine = PassthroughEngine('contact', {'paths.templates': str(tmp_path)})
        engine.init_engine()
        engine.set('title', 'ignored')

        output = engine.render()
        assert output == '<h1>{{ title }}</h1>'
        assert isinstance(output, Markup)


class TestJinjaEngine(object):
    def make_engine(self, root, filename='contact', **options):
        config = {'paths.templates': str(root)}
        config.update(options)
        engine = JinjaEngine(filename, config)
        engine.init_engine()
        return engine

    def test_render(self, tmp_path):
        write_templates(tmp_path, {'contact.jinja': '<h1>{{ page.title }}</h1>{{ body }}'})
        engine = self.make_engine(tmp_path)
        engine.set('page', Bunch(title='Contact'))
        engine.set('body', '<script>')

        output = engine.render()
        assert output == '<h1>Contact</h1>&lt;script&gt;'
        assert isinstance(output, Markup)

    def test_extends(self, tmp_path):
        write_templates(tmp_path, {
            'layout.jinja': '<body>{% block content %}{% endblock %}</body>',
            'contact.jinja': '{% extends "layout.jinja" %}{% block content %}Hi{% endblock %}'
        })
        assert self.make_engine(tmp_path).render() == '<body>Hi</body>'

    def test_extensions(self, tmp_path):
        write_templates(tmp_path, {'contact.jinja': '{% set l = [] %}{% do l.append(1) %}{{ l }}'})
        engine = self.make_engine(tmp_path, **{'templatefactory.jinja.extensions': 'jinja2.ext.do'})
        assert engine.render() == '[1]'

    def test_bad_extension(self, tmp_path):
        with pytest.raises(EngineInitializationError):
            self.make_engine(tmp_path, **{'templatefactory.jinja.extensions': 'jinja2.ext.nothere'})

    def test_no_caching_by_default(self, tmp_path):
        write_templates(tmp_path, {'contact.jinja': 'First'})
        engine = self.make_engine(tmp_path)
        assert engine.render() == 'First'

        write_templates(tmp_path, {'contact.jinja': 'Second'})
        assert self.make_engine(tmp_path).render() == 'Second'

    def test_output_cache_shared_across_engines(self, tmp_path):
        write_templates(tmp_path, {'contact.jinja': 'First'})
        options = {'templatefactory.jinja.caching': True}
        assert self.make_engine(tmp_path, **options).render() == 'First'

        write_templates(tmp_path, {'contact.jinja': 'Second'})
        engine = self.make_engine(tmp_path, **options)
        assert engine.render() == 'First'

        engine.clear_all_cache()
        assert self.make_engine(tmp_path, **options).render() == 'Second'

    def test_output_cache_keyed_by_variables(self, tmp_path):
        write_templates(tmp_path, {'contact.jinja': '{{ name }}'})
        options = {'templatefactory.jinja.caching': True}

        engine = self.make_engine(tmp_path, **options)
        engine.set('name', 'Alice')
        assert engine.render() == 'Alice'

        engine = self.make_engine(tmp_path, **options)
        engine.set('name', 'Bob')
        assert engine.render() == 'Bob'

    def test_output_cache_reused_for_same_size(self, tmp_path):
        write_templates(tmp_path, {'contact.jinja': 'Contact'})
        first = self.make_engine(tmp_path)
        second = self.make_engine(tmp_path)
        assert first.output_cache is second.output_cache
        assert len(JinjaEngine._output_caches) == 1

    def test_output_cache_follows_cache_size(self, tmp_path):
        write_templates(tmp_path, {'contact.jinja': 'First'})
        options = {'templatefactory.jinja.caching': True}
        engine = self.make_engine(tmp_path, **options)
        assert engine.output_cache.size == 256
        assert engine.render() == 'First'

        write_templates(tmp_path, {'contact.jinja': 'Second'})
        options['templatefactory.jinja.cache_size'] = '10'
        engine = self.make_engine(tmp_path, **options)
        assert engine.output_cache.size == 10
        assert engine.render() == 'Second'
        assert JinjaEngine._output_caches[engine.get_templates_path()] is engine.output_cache


class TestMakoEngine(object):
    def make_engine(self, root, filename='contact', **options):
        config = {'paths.templates': str(root)}
        config.update(options)
        engine = MakoEngine(filename, config)
        engine.init_engine()
        return engine

    def test_render(self, tmp_path):
        write_templates(tmp_path, {'contact.mak': '<h1>${page.title}</h1>${body}'})
        engine = self.make_engine(tmp_path)
        engine.set('page', Bunch(title='Contact'))
        engine.set('body', '<b>')

        output = engine.render()
        assert output == '<h1>Contact</h1>&lt;b&gt;'
        assert isinstance(output, Markup)

    def test_compiled_templates_dir(self, tmp_path):
        write_templates(tmp_path, {'contact.mak': 'Hello'})
        compiled_dir = str(tmp_path / 'compiled')
        engine = self.make_engine(tmp_path, **{
            'templatefactory.mako.compiled_templates_dir': compiled_dir})

        assert engine.render() == 'Hello'
        assert os.path.isdir(compiled_dir)
        assert os.listdir(compiled_dir)

    def test_compiled_templates_dir_disabled(self, tmp_path):
        write_templates(tmp_path, {'contact.mak': 'Hello'})
        engine = self.make_engine(tmp_path, **{
            'templatefactory.mako.compiled_templates_dir': 'false'})
        assert engine.loader.module_directory is None
        assert engine.render() == 'Hello'

    def test_compiled_templates_dir_not_creatable(self, tmp_path):
        write_templates(tmp_path, {'contact.mak': 'Hello'})
        blocker = tmp_path / 'blocker'
        blocker.write_text('not a directory')
        engine = self.make_engine(tmp_path, **{
            'templatefactory.mako.compiled_templates_dir': str(blocker / 'compiled')})
        assert engine.loader.module_directory is None
        assert engine.render() == 'Hello'
