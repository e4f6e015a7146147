#!/usr/bin/env python

from setuptools import setup

import os.path
import re
import sys


def get_version():
    path = os.path.join('tagtree', 'version.py')

    with open(path, 'r') as version_file:
        content = version_file.read()
        return re.search(r"__version__ = u?'(.+)'", content).group(1)


version = get_version()


PROJECT_PACKAGES = [
    'tagtree',
    'tagtree.testing',
]
PROJECT_PACKAGE_DIR = {}


setup_kwargs = dict(
    name='tagtree',
    version=version,
    description='Permissive HTML parser producing a validated element tree.',
    package_data={'': [
        'testing/samples/*.html',
    ]},
    classifiers=[
        'Development Status :: 4 - Beta',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Text Processing :: Markup :: HTML',
    ],
    packages=PROJECT_PACKAGES,
    package_dir=PROJECT_PACKAGE_DIR,
    entry_points={
        'console_scripts': [
            'tagtree=tagtree.main:main',
        ],
    },
    extras_require={
        'test': ['pytest', 'lxml'],
    },
    python_requires='>=3.6',
)


setup_kwargs['install_requires'] = [
    'beautifulsoup4>=4.10',
    'chardet>=3.0.2',
]


if __name__ == '__main__':
    # this check is for old versions of pip/setuptools
    if sys.version_info[0] < 3:
        raise Exception('Sorry, Python 2 is not supported.')

    setup(**setup_kwargs)
