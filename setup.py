#! /usr/bin/env python
"""MediaRange package setuptools installer."""

import setuptools


name = 'MediaRange'


params = dict(
    name=name,
    version='1.0.0',
    description='HTTP Accept header content-type negotiation',
    long_description=(
        'Parse mime-types and media ranges, score them against an '
        'Accept header and pick the best match, as described in '
        'RFC 2616 section 14.1.'
    ),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    packages=[
        'mediarange', 'mediarange.lib',
        'mediarange.test',
    ],
    include_package_data=True,
    install_requires=[
        'more_itertools',
        'jaraco.collections',
    ],
    extras_require={
        'testing': [
            'pytest>=5.3.5',
            'pytest-cov',
        ],
    },
    python_requires='>=3.8',
)


__name__ == '__main__' and setuptools.setup(**params)
