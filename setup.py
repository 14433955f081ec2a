# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="buildtree",
    version="0.1.0",
    description="Source tree indexing and build subtree resolution for multi-stage kernel builds",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["buildtree", "buildtree.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'buildtree=buildtree.main:main',  # buildtree --config-file build.json
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
