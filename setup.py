"""polyspec, perceived colors of absorbance spectra."""
from setuptools import setup

setup(
    name='polyspec',
    version='0.1.0',
    description='Perceived color of gaussian absorbance spectra under D65, for teaching conjugation and color',
    packages=['polyspec'],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
        'matplotlib',
    ],
    extras_require={
        'tests': ['pytest'],
    },
)
