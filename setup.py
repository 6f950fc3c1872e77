from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name                          = "namecombo",
    version                       = "0.1.0",
    author                        = "namecombo contributors",
    description                   = "Represent, render and store personal names with support for German naming conventions.",
    long_description              = long_description,
    long_description_content_type = 'text/markdown',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Natural Language :: German",
    ],
    packages                      = find_packages(exclude=["tests", "tests.*"]),
    python_requires               = ">=3.10",
    install_requires=[
          'pydantic>=2',
          'rich',
          'python-dotenv',
          'langcodes',
    ],
    extras_require={
          'serde': ['orjson'],
          'test': ['pytest'],
    },
)
