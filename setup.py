# -*- coding: utf-8 -*-

"""\
VAWTDmst - Double-multiple-streamtube performance prediction for vertical axis wind turbines
"""

from setuptools import setup, find_packages

VERSION = "0.0.1"

classifiers = [
    "Development Status :: 3 - Alpha",
    "License :: OSI Approved :: Apache Software License",
    "Operating System :: POSIX",
    "Operating System :: POSIX :: Linux",
    "Operating System :: MacOS :: MacOS X",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: Implementation :: CPython",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Utilities",
]

setup(
    name="VAWTDmst",
    version=VERSION,
    license="Apache License, Version 2.0",
    description="Double-multiple-streamtube model of vertical axis wind turbines",
    long_description=__doc__,
    platforms="any",
    classifiers=classifiers,
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "pandas",
        "scipy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    packages=find_packages(exclude=["tests"]),
)
