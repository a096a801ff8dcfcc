import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("base79/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="base79",
    version=version,
    description="Sortable base-79 fractional keys. Insert between any two items without renumbering.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.7',
    entry_points={
        'console_scripts': [
            'base79=base79.cli:main',
        ],
    },
    # NOTE:  No install_requires.  Tests are unittest, beside the code:
    #        python -m unittest discover -s base79 -t .
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
        "Topic :: Text Processing",
            # fractional indexing
            # collaborative editing
            # ordered lists
    ],
)
