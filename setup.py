#!/usr/bin/env python
""" Simple friendly validator for records of data """

from setuptools import setup, find_packages

setup(
    # http://pythonhosted.org/setuptools/setuptools.html
    name='fieldcheck',
    version='0.1.0',
    author='fieldcheck contributors',

    license='BSD',
    description=__doc__,
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    keywords=['validation', 'schema'],

    packages=find_packages(exclude=['tests', 'tests.*']),
    scripts=[],
    entry_points={},

    python_requires='>=3.7',
    install_requires=[
        'python-dateutil >= 2.8.1',
        'python-stdnum >= 1.13',
        'webcolors >= 1.11',
        'idna >= 2.10',
    ],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True,

    platforms='any',
    classifiers=[
        # https://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
