# setup.py
from setuptools import setup, find_packages

setup(
    name="leafpaths",
    version="1.0.0",
    description="Rebuild a forest from parent-labeled records and list every root-to-leaf path",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "requests",  # Remote (http/https) record sources
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'leafpaths=leafpaths.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
