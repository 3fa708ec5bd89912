# -*- coding: utf-8; -*-

import io
import os
import re

from setuptools import setup


metadata = {}
with io.open(os.path.join('httpchars', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst', encoding='utf-8') as f:
    long_description = f.read()

# Shields reflect current status; they are good in a README when viewed
# on Git master, but not in versions published on PyPI.
long_description = re.sub(r'^\.\. status:.*?\n\n', u'', long_description,
                          flags=re.DOTALL | re.MULTILINE)

setup(
    name='httpchars',
    version=metadata['version'],
    description='Validator for HTTP tokens and cookie values',
    long_description=long_description,
    url=metadata['homepage'],
    license='MIT',
    python_requires='>=3.6',

    install_requires=[
        'bitstring >= 3.1.4',
    ],
    extras_require={
        'tests': [
            'pytest >= 3.9',
        ],
    },

    packages=[
        'httpchars',
        'httpchars.syntax',
        'httpchars.util',
    ],
    entry_points={
        'console_scripts': [
            'httpchars=httpchars.cli:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Quality Assurance',
    ],
    keywords='HTTP token cookie RFC 7230 RFC 6265 validator',
)
