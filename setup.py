# -*- coding: utf-8 -*-
"""
Created on Tue Mar 12 09:48:30 2024

@author: danielgodinez
"""
from setuptools import setup, find_packages

setup(
    name="LightcurveMC",
    version="1.0.0",
    author="Daniel Godinez",
    author_email="danielgodinez123@gmail.com",
    description="Monte Carlo statistics of simulated astronomical light curves",
    long_description="Accumulates periodogram, autocorrelation, Δm-Δt, peak-finding and Gaussian process timescales over many simulated light curves, and summarizes them per bin of model parameters.",
    license="GPL-3.0",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Astronomy",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(),
    install_requires=[
        "numpy",
        "scipy",
        "astropy",
        "pandas<3",
        "matplotlib",
        "progress",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
)
