from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="swaycycle",
    version="0.1",
    description="Cycle focus through the windows of the focused sway workspace",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="swaycycle contributors",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "Orjson",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
    package_data={
        "swaycycle": ["settings.json"],
    },
    entry_points={
        "console_scripts": ["swaycycle = swaycycle.run:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],
)
