from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="filepath",
    version="0.1.0",
    description="Immutable filesystem-style path values with string parsing and rendering.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"filepath.schemas": ["*.json"]},
    python_requires=">=3.10",
    install_requires=["PyYAML", "jsonschema"],
    extras_require={"dev": ["pytest"]},
    entry_points={
        "console_scripts": ["filepath=filepath.cli:main"],
    },
)
