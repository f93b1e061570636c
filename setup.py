import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="rootsolve",
    version="0.1.0",
    author="rootsolve developers",
    description="Iterative root finding for scalar functions of one "
                "variable, with Aitken acceleration.",
    include_package_data=True,
    install_requires=[
        'click',
        'numpy'
    ],
    extras_require={
        'plot': ['matplotlib'],
        'test': ['pytest', 'matplotlib'],
        'doc': ['sphinx', 'pydata-sphinx-theme'],
    },
    entry_points={
        'console_scripts': ['rootsolve=rootsolve.cli:main'],
    },
    keywords='root finding newton bisection secant fixed point aitken',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['rootsolve', 'rootsolve.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
