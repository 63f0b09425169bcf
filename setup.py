"""
Copyright (c) 2020-2023 AustEcon i.e. Hayden J. Donnelly <austecon0922@gmail.com>

To run the benchmark:
> python bench_blocks.py --blocks-dir ./blocks --height 623200
"""

from setuptools import find_packages, setup

version = "0.0.1"


setup(
    name='blockbench',
    version=version,
    description='Micro-benchmark of bitcoin block parsing from json and hex encodings',
    author='AustEcon',
    author_email='AustEcon0922@gmail.com',
    maintainer='AustEcon',
    maintainer_email='AustEcon0922@gmail.com',

    keywords=[
        'bsv',
        'bitcoin',
        'benchmark',
        'block parsing',
    ],

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: Implementation :: CPython',
    ],

    python_requires='>=3.10',
    install_requires=['bitcoinx'],
    extras_require={'test': ['pytest']},
    tests_require=['pytest'],
    zip_safe=False,
    packages=find_packages(exclude=['tests', 'tests.*']),
    py_modules=['bench_blocks'],
    entry_points={
        'console_scripts': ['bench-blocks=blockbench.runner:main'],
    },
)
