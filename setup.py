from setuptools import setup, find_namespace_packages

setup(
    name="library_circulation",
    version="0.1.0",
    packages=find_namespace_packages(include=['cli*', 'core*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "library-circulation=cli.main:main",
        ],
    },
)
