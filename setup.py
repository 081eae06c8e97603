import os

from setuptools import find_packages, setup

setup(
    name="typeshape",
    version="0.1.0",
    packages=find_packages(include=["typeshape", "typeshape.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="typeshape Contributors",
    description="Runtime validation of untyped values against composable type descriptors",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
