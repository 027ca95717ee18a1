# -*- coding: utf-8; -*-

import io
import os

from setuptools import setup


metadata = {}
with io.open(os.path.join('mediatype', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='mediatype-rfc6838',
    version=metadata['version'],
    description='Validator and parser for RFC 6838 media types',
    long_description=long_description,
    url=metadata['homepage'],
    license='MIT',

    python_requires='>= 3.6',
    install_requires=[
        'bitstring >= 4.1',
    ],
    extras_require={
        'test': [
            'pytest >= 3.0',
        ],
    },

    packages=[
        'mediatype',
        'mediatype.known',
        'mediatype.syntax',
        'mediatype.util',
    ],
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    keywords='media type MIME content type RFC 6838 parser validator',
)
