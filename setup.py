from setuptools import setup, find_packages
import re

versionPattern = re.compile(r"""^__version__ = ['"](.*?)['"]$""", re.M)
with open("formhelpers/_version.py", "rt") as f:
    version = versionPattern.search(f.read()).group(1)

setup(
    name="FormHelpers",
    version=version,
    license="MIT",
    platforms=["any"],
    description="Helpers generating HTML form markup",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Framework :: Twisted",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
        "Topic :: Text Processing :: Markup :: HTML",
        ],
    install_requires=[
        "Twisted>=14.0.0",
        "zope.interface",
        "incremental",
        "Epsilon>=0.8.0",
        ],
    packages=find_packages(),
    include_package_data=True,
    )
