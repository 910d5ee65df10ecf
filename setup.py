import re

from setuptools import setup, find_packages


with open("slicendice/version.py") as f:
    version = re.search(r"version = \"(.*)\"", f.read()).group(1)


with open("README.rst") as f:
    long_description = f.read()

setup(
    name="SliceNDice",
    version=version,
    description="Zero-copy multi-dimensional views over flat containers (lists, arrays, etc.)",
    long_description=long_description,
    keywords=['array', 'slicing', 'view', 'reshape', 'strides'],
    license="Mozilla Public License 2.0 (MPL 2.0)",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)",
        "Development Status :: 3 - Alpha",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research"],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.6",
    install_requires=[],
    extras_require={
        'numpy support': [
            'numpy'],
        'tests': [
            'pytest', 'numpy', 'coverage']
    }
)
