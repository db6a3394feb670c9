#! /usr/bin/env python

from pulsar_admin import __version__

from setuptools import setup


setup(name               = 'pulsar-admin-lookup',
    version              = __version__,
    description          = 'Resolve Pulsar topics to their brokers and bundles',
    license              = "MIT License",
    keywords             = 'pulsar, lookup, admin',
    packages             = ['pulsar_admin', 'pulsar_admin.http'],
    package_dir          = {
        'pulsar_admin': 'pulsar_admin',
        'pulsar_admin.http': 'pulsar_admin/http'},
    python_requires      = '>=3.8',
    classifiers          = [
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent'
    ],
    install_requires=[
        'requests',
        'decorator'
    ],
    extras_require={
        'test': [
            'pytest',
            'mock',
            'coverage'
        ]
    }
)
