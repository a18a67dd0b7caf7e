"""Template engines the factory is able to drive."""
from .base import TemplateEngine, CacheInvalidatable, supports_invalidation
from .none import PassthroughEngine
from .jinja import JinjaEngine
from .mako import MakoEngine

__all__ = ['TemplateEngine', 'CacheInvalidatable', 'supports_invalidation',
           'PassthroughEngine', 'JinjaEngine', 'MakoEngine']
