import os
here = os.path.abspath(os.path.dirname(__file__))
exec(compile(open(os.path.join(here, 'templatefactory', 'release.py')).read(), 'release.py', 'exec'), globals(), locals())

from setuptools import find_packages, setup

test_requirements = ['pytest',
                     'WebTest',
                     'jinja2',
                     'Mako',
                     'coverage']

install_requires=[
    'WebOb >= 1.8.0',
    'repoze.lru',
    'MarkupSafe'
]

setup(
    name='TemplateEngineFactory',
    version=version,
    description=description,
    long_description=long_description,
    classifiers=[
        'Intended Audience :: Developers',
        'Environment :: Web Environment',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Internet :: WWW/HTTP :: WSGI',
        'Topic :: Text Processing :: Markup :: HTML',
    ],
    keywords='templates jinja mako cms',
    author=author,
    author_email=email,
    url=url,
    license=license,
    python_requires='>=3.7',
    packages=find_packages(exclude=('ez_setup', 'examples', 'tests', 'tests.*')),
    include_package_data=True,
    zip_safe=False,
    install_requires=install_requires,
    extras_require={
       'jinja': ['jinja2'],
       'mako': ['Mako'],
       'testing': test_requirements,
    },
    entry_points='''
    '''
)
