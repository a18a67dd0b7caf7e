"""TemplateEngineFactory project related information"""
version = "1.0.0"
description = "Template engine dispatch for content management page rendering"
long_description="""
TemplateEngineFactory decouples the page rendering step of a content
management application from a specific template engine.

For each request it resolves the configured engine, binds it to the
template of the page being rendered and replaces the default page output
with the engine output. Engines keeping a rendered output cache are
cleared whenever content is saved or deleted.

Supported engines:

 * passthrough (``none``), serves template files as they are
 * Jinja2 (``jinja``)
 * Mako (``mako``)
"""
url="https://github.com/templatefactory/templatefactory"
author= "TemplateEngineFactory contributors"
email = "templatefactory@example.org"
copyright = """Copyright 2026 TemplateEngineFactory contributors"""
license = "MIT"
