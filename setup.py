"""
Setup script for cricut-finder
"""

from setuptools import setup, find_packages
import pathlib

# Read the README file
HERE = pathlib.Path(__file__).parent
README = (HERE / "README.md").read_text(encoding="utf-8")

setup(
    name="cricut-finder",
    version="1.0.0",
    description="Find Cricut Design Space canvas images and open their folders",
    long_description=README,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["cricut_finder", "cricut_finder.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.11.5",
        "pyyaml>=6.0.1",
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "cricut-finder=cricut_finder.interfaces.cli.main:entry_point",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",
    ],
    keywords="cricut design-space files finder",
)
