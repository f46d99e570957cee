from setuptools import setup, find_packages
from os import path
from io import open

setup_dir = path.abspath(path.dirname(__file__))
with open(path.join(setup_dir, 'README.md'),
          encoding='utf-8') as readme_file:
    long_description = readme_file.read()

setup(
    name="hyperbolic_numbers",
    version="0.1",
    packages=find_packages(include=["hyperbolic_numbers",
                                    "hyperbolic_numbers.*"]),
    include_package_data=True,

    install_requires=[
        "numpy>=2.0",
        "matplotlib>=3.5"
    ],

    extras_require={
        "test": ["pytest"]
    },

    license="MIT",
    description="""Arithmetic, Minkowski geometry and plotting for
    hyperbolic (split-complex) numbers""",

    long_description=long_description,
    long_description_content_type="text/markdown"
)
