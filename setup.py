PACKAGE_NAME = "rapidms"
VERSION = "0.1.0"
LICENSE = 'BSD (3-clause)'
AUTHOR = "rapidms developers"
AUTHOR_EMAIL = "rapidms@example.org"
MAINTAINER = AUTHOR
MAINTAINER_EMAIL = AUTHOR_EMAIL
DESCRIPTION = "Fast peak picking for high resolution MS data"

with open("README.md") as fin:
    LONG_DESCRIPTION = fin.read()
LONG_DESCRIPTION_CONTENT_TYPE = "text/markdown"

CLASSIFIERS = [
    "License :: OSI Approved :: BSD License",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Topic :: Scientific/Engineering :: Chemistry",
]

PYTHON_REQUIRES = ">=3.10"

INSTALL_REQUIRES = [
    "numpy>=1.22",
    "pydantic>=2.0",
    "tqdm>=4.0",
]

EXTRAS_REQUIRE = {
    "test": ["pytest"],
}

if __name__ == "__main__":
    from setuptools import setup, find_packages
    from sys import version_info

    if version_info[:2] < (3, 10):
        msg = "rapidms requires Python >= 3.10."
        raise RuntimeError(msg)

    setup(name=PACKAGE_NAME,
          version=VERSION,
          author=AUTHOR,
          author_email=AUTHOR_EMAIL,
          maintainer=MAINTAINER,
          maintainer_email=MAINTAINER_EMAIL,
          license=LICENSE,
          description=DESCRIPTION,
          long_description=LONG_DESCRIPTION,
          long_description_content_type=LONG_DESCRIPTION_CONTENT_TYPE,
          classifiers=CLASSIFIERS,
          package_dir={"": "src"},
          packages=find_packages("src"),
          python_requires=PYTHON_REQUIRES,
          install_requires=INSTALL_REQUIRES,
          extras_require=EXTRAS_REQUIRE,
          include_package_data=True)
