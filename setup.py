# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="routescope",
    version="0.1.0",
    description="Static route discovery for Next.js and React projects",
    packages=find_namespace_packages(where="src", include=["routescope*"]),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'routescope=routescope.interface.cli.app:main',  # Both subcommands behind one executable
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
