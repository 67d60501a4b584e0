# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treeshell",
    version="1.0.0",
    description="Interactive in-memory directory tree shell with save/reload to a flat text file",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treeshell", "treeshell.*"]),
    package_data={
        "treeshell.interface": ["locales/*.json"],
    },
    include_package_data=True,
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treeshell=treeshell.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
